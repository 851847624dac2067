"""
Validator Descriptor - one normalized entry of a validator chain.

A chain entry is declared either as a bare validator function or as a
FullValidator (or plain mapping) carrying a message override and custom
arguments. Both shapes are resolved here, once, into a ValidatorDescriptor
so the chain executor never has to inspect the declaration again.

Validators may be sync or async; invoke() awaits whatever is awaitable.
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import ValidationError

from formvalidation.core.errors import (
    InvalidValidatorResultError,
    SchemaDefinitionError,
)
from formvalidation.core.models import FullValidator, ValidationResult, ValidatorContext


@dataclass(frozen=True)
class ValidatorDescriptor:
    """Uniform invocation record for a validator."""

    predicate: Callable[[ValidatorContext], Any]
    message: str | None = None
    custom_args: Any = None

    @property
    def name(self) -> str:
        """Readable validator name, used in logs and errors."""
        return getattr(self.predicate, "__name__", type(self.predicate).__name__)

    async def invoke(
        self, value: Any, values: Any, name: str | None = None
    ) -> ValidationResult:
        """
        Call the validator and return its result.

        Args:
            value: Current value of the field (None for record validators)
            values: The whole value set
            name: Field path or record key being validated

        Returns:
            The validator's ValidationResult, message untouched

        Raises:
            InvalidValidatorResultError: If the validator returns a non-result
        """
        context = ValidatorContext(
            value=value,
            values=values,
            message=self.message,
            custom_args={} if self.custom_args is None else self.custom_args,
            name=name,
        )

        result = self.predicate(context)
        if inspect.isawaitable(result):
            result = await result

        return self._coerce(result, name)

    def _coerce(self, result: Any, key: str | None) -> ValidationResult:
        """Accept a ValidationResult or a mapping with the same fields."""
        if isinstance(result, ValidationResult):
            return result

        if isinstance(result, Mapping):
            try:
                return ValidationResult.model_validate(dict(result))
            except ValidationError as e:
                raise InvalidValidatorResultError(key, self.name, result) from e

        raise InvalidValidatorResultError(key, self.name, result)


def normalize_validator(entry: Any, key: str | None = None) -> ValidatorDescriptor:
    """
    Resolve a chain entry into a ValidatorDescriptor.

    Args:
        entry: A validator function, a FullValidator or a mapping with
            "validator", "message" and "custom_args" (or "customArgs")
        key: Field path or record key the entry belongs to, for errors

    Returns:
        The normalized descriptor

    Raises:
        SchemaDefinitionError: If the entry has neither shape
    """
    if isinstance(entry, ValidatorDescriptor):
        return entry

    if isinstance(entry, Mapping):
        try:
            entry = FullValidator.model_validate(dict(entry))
        except ValidationError as e:
            raise SchemaDefinitionError(
                f"Invalid validator entry for {key!r}: {e.errors()[0]['msg']}", key
            ) from e

    if isinstance(entry, FullValidator):
        return ValidatorDescriptor(
            predicate=entry.validator,
            message=entry.message,
            custom_args=entry.custom_args,
        )

    if callable(entry):
        return ValidatorDescriptor(predicate=entry)

    raise SchemaDefinitionError(
        f"Validator entry for {key!r} must be callable or a validator "
        f"descriptor, got: {type(entry).__name__}",
        key,
    )
