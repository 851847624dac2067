"""formvalidation - validator chains aggregated into form error reports."""

from formvalidation.core.errors import (
    FormValidationError,
    InvalidValidatorResultError,
    SchemaDefinitionError,
)
from formvalidation.core.models import FullValidator, ValidationResult, ValidatorContext
from formvalidation.core.schema import ValidationSchema
from formvalidation.engine.evaluator import FormReport
from formvalidation.validation import FormValidation, create_validation

__version__ = "0.1.0"

__all__ = [
    "FormReport",
    "FormValidation",
    "FormValidationError",
    "FullValidator",
    "InvalidValidatorResultError",
    "SchemaDefinitionError",
    "ValidationResult",
    "ValidationSchema",
    "ValidatorContext",
    "create_validation",
]
