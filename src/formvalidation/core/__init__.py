"""formvalidation core - models, schema and chain execution."""

from formvalidation.core.chain import run_chain
from formvalidation.core.descriptor import ValidatorDescriptor, normalize_validator
from formvalidation.core.models import FullValidator, ValidationResult, ValidatorContext
from formvalidation.core.schema import SchemaStore, ValidationSchema

__all__ = [
    "FullValidator",
    "SchemaStore",
    "ValidationResult",
    "ValidationSchema",
    "ValidatorContext",
    "ValidatorDescriptor",
    "normalize_validator",
    "run_chain",
]
