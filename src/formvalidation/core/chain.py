"""
Chain Executor - run one validator chain against one target.

A chain is evaluated strictly in declaration order, one validator at a
time, and stops at the first failure. Validators after a failure are never
called. Exceptions raised by a validator propagate to the caller as-is.
"""

import logging
from collections.abc import Sequence
from typing import Any

from formvalidation.core.descriptor import ValidatorDescriptor
from formvalidation.core.models import ValidationResult

logger = logging.getLogger(__name__)

Chain = tuple[ValidatorDescriptor, ...]


async def run_chain(
    chain: Sequence[ValidatorDescriptor],
    value: Any,
    values: Any,
    name: str | None = None,
) -> ValidationResult | None:
    """
    Evaluate a chain of validators.

    Args:
        chain: Normalized validators, in declaration order
        value: Value of the target field (None for records)
        values: The whole value set
        name: Field path or record key being validated

    Returns:
        The first failing ValidationResult, or None if all succeeded
    """
    for descriptor in chain:
        result = await descriptor.invoke(value, values, name)
        if not result.succeeded:
            logger.debug(f"Validator {descriptor.name} failed for {name!r}")
            return result

    return None
