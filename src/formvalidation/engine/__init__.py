"""Evaluator - field, record and form evaluation."""

from formvalidation.engine.evaluator import (
    FormReport,
    evaluate_field,
    evaluate_form,
    evaluate_records,
)

__all__ = ["FormReport", "evaluate_field", "evaluate_form", "evaluate_records"]
