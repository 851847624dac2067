"""Core models for formvalidation.

These models define the contract between the engine and the validators
it runs:
- ValidationResult returned by every validator
- FullValidator, the descriptor form of a chain entry
- ValidatorContext handed to every validator call
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Validator Results
# =============================================================================


class ValidationResult(BaseModel):
    """Outcome of a single validator invocation."""

    model_config = ConfigDict(frozen=True)

    succeeded: bool
    message: str = ""
    type: str = ""  # Opaque tag set by the validator, passed through untouched

    @field_validator("message", "type", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat a missing message or type as empty."""
        return "" if v is None else v


# =============================================================================
# Schema Entries
# =============================================================================


class FullValidator(BaseModel):
    """A validator declared together with its message override and arguments."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    validator: Callable[..., Any]
    message: str | None = None
    custom_args: Any = Field(default=None, alias="customArgs")


@dataclass(frozen=True)
class ValidatorContext:
    """Arguments available to a validator during a call."""

    value: Any = None
    values: Any = None
    message: str | None = None
    custom_args: Any = field(default_factory=dict)
    name: str | None = None
