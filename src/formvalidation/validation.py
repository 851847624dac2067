"""
FormValidation - the public entry points of the engine.

Every call captures the schema snapshot once at entry, so a concurrent
update_validation_schema() only affects calls started after it returns.
"""

from collections.abc import Mapping
from typing import Any

from formvalidation.config import Settings, get_settings
from formvalidation.core.schema import SchemaStore, ValidationSchema
from formvalidation.engine.evaluator import (
    FormReport,
    evaluate_field,
    evaluate_form,
    evaluate_records,
)


class FormValidation:
    """
    Validates form values against a schema of field and record chains.

    Results are shaped for a form layer:
    - validate_field: message of the first failing validator, or None
    - validate_record: {"recordErrors": {...failing keys...}}, or None
    - validate_form: nested field messages plus "recordErrors", or None
    """

    def __init__(
        self,
        schema: ValidationSchema | Mapping[str, Any] | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self._store = SchemaStore(schema)

    @property
    def schema(self) -> ValidationSchema:
        """The schema new calls will be evaluated against."""
        return self._store.snapshot

    async def validate_field(
        self, path: str, value: Any, values: Any = None
    ) -> str | None:
        """
        Validate a single field.

        Args:
            path: Field path as declared in the schema
            value: Current value of the field
            values: The whole value set, passed through to validators

        Returns:
            Message of the first failing validator, or None
        """
        schema = self._store.snapshot
        result = await evaluate_field(schema, path, value, values)
        return result.message if result else None

    async def validate_record(self, values: Any) -> dict[str, dict[str, str]] | None:
        """
        Run every record chain against the value set.

        Returns:
            {"recordErrors": {key: message}} for the failing keys only,
            or None if every record succeeded
        """
        schema = self._store.snapshot
        results = await evaluate_records(schema, values)

        errors = {key: r.message for key, r in results.items() if r is not None}
        if not errors:
            return None
        return {self.settings.record_errors_key: errors}

    async def evaluate_form(self, values: Any) -> FormReport:
        """Run every field and record chain and return the full report."""
        schema = self._store.snapshot
        return await evaluate_form(schema, values, self.settings.path_separator)

    async def validate_form(self, values: Any) -> dict[str, Any] | None:
        """
        Validate every declared field and record.

        Returns:
            None if everything succeeded; otherwise the nested error tree,
            where every declared field and record is present ('' = passed)
        """
        report = await self.evaluate_form(values)
        return report.to_error_tree(
            record_errors_key=self.settings.record_errors_key,
            separator=self.settings.path_separator,
        )

    def update_validation_schema(
        self, schema: ValidationSchema | Mapping[str, Any] | None
    ) -> None:
        """
        Replace the schema.

        The new schema is a full replacement: build it from the old one
        (e.g. {**old, "field": {...}}) if you want to keep entries.
        """
        self._store.replace(schema)


def create_validation(
    schema: ValidationSchema | Mapping[str, Any] | None = None,
    settings: Settings | None = None,
) -> FormValidation:
    """Create a FormValidation bound to `schema`."""
    return FormValidation(schema, settings)
