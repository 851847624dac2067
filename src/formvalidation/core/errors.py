"""Exceptions raised by the validation engine.

Failed validations are never exceptions; they come back as messages.
These cover broken schemas and misbehaving validators.
"""


class FormValidationError(Exception):
    """Base exception for validation engine errors."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class SchemaDefinitionError(FormValidationError):
    """A schema definition or one of its chain entries is malformed."""


class InvalidValidatorResultError(FormValidationError):
    """A validator returned something that is not a validation result."""

    def __init__(self, key: str | None, validator_name: str, result: object):
        super().__init__(
            f"Validator {validator_name} for {key!r} returned "
            f"{type(result).__name__}, expected a ValidationResult",
            key,
        )
        self.validator_name = validator_name
        self.result = result
