"""
Evaluator - field, record and whole-form evaluation.

The evaluator is responsible for:
1. Running the chain of a single field path
2. Running every record chain against the whole value set
3. Running every declared chain of a form concurrently
4. Shaping the outcome into the nested error tree the form layer consumes

Every function here receives the schema snapshot to use as an argument;
none of them reads a mutable "current schema".
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable

from formvalidation.core.chain import run_chain
from formvalidation.core.models import ValidationResult
from formvalidation.core.paths import get_path, set_path
from formvalidation.core.schema import ValidationSchema

logger = logging.getLogger(__name__)


async def _gather_chains(*chains: Awaitable[Any]) -> list[Any]:
    """
    Run chains concurrently and wait for every one of them.

    If any chain raised, the first exception in argument order is
    re-raised unchanged once all chains have settled.
    """
    results = await asyncio.gather(*chains, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


@dataclass
class FormReport:
    """Outcome of every declared chain of a form, keyed by field path / record key."""

    fields: dict[str, ValidationResult | None] = field(default_factory=dict)
    records: dict[str, ValidationResult | None] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        """True when no field and no record failed."""
        return all(r is None for r in self.fields.values()) and all(
            r is None for r in self.records.values()
        )

    def failed_fields(self) -> dict[str, str]:
        """Messages of the failing fields only."""
        return {path: r.message for path, r in self.fields.items() if r is not None}

    def failed_records(self) -> dict[str, str]:
        """Messages of the failing records only."""
        return {key: r.message for key, r in self.records.items() if r is not None}

    def to_error_tree(
        self, record_errors_key: str = "recordErrors", separator: str = "."
    ) -> dict[str, Any] | None:
        """
        Build the error tree for a form layer.

        Returns None when everything succeeded. Otherwise every declared
        field appears at its nested position and every declared record
        appears under `record_errors_key`, with '' for the ones that passed.
        """
        if self.succeeded:
            return None

        tree: dict[str, Any] = {}
        for path, result in self.fields.items():
            set_path(tree, path, result.message if result else "", separator)

        tree[record_errors_key] = {
            key: result.message if result else "" for key, result in self.records.items()
        }
        return tree


async def evaluate_field(
    schema: ValidationSchema, path: str, value: Any, values: Any = None
) -> ValidationResult | None:
    """
    Run the chain declared for one field path.

    Args:
        schema: Schema snapshot to evaluate against
        path: Field path, exactly as declared in the schema
        value: Current value of the field
        values: The whole value set, if available

    Returns:
        The first failing result, or None (also for undeclared paths)
    """
    chain = schema.field.get(path, ())
    return await run_chain(chain, value, values, path)


async def evaluate_records(
    schema: ValidationSchema, values: Any
) -> dict[str, ValidationResult | None]:
    """
    Run every declared record chain concurrently.

    A failing record never stops another record's chain.

    Returns:
        Result per record key (None for the ones that succeeded)
    """
    keys = list(schema.record)
    results = await _gather_chains(
        *(run_chain(schema.record[key], None, values, key) for key in keys)
    )
    return dict(zip(keys, results))


async def evaluate_form(
    schema: ValidationSchema, values: Any, separator: str = "."
) -> FormReport:
    """
    Run every declared field and record chain concurrently.

    Field values are resolved from `values` by walking the field path;
    missing intermediate objects resolve to None.

    Args:
        schema: Schema snapshot to evaluate against
        values: The whole value set
        separator: Field path segment separator

    Returns:
        FormReport with the outcome of every declared chain
    """
    paths = list(schema.field)
    keys = list(schema.record)

    results = await _gather_chains(
        *(
            run_chain(schema.field[path], get_path(values, path, separator), values, path)
            for path in paths
        ),
        *(run_chain(schema.record[key], None, values, key) for key in keys),
    )

    report = FormReport(
        fields=dict(zip(paths, results[: len(paths)])),
        records=dict(zip(keys, results[len(paths) :])),
    )

    if not report.succeeded:
        logger.debug(
            f"Form invalid: {len(report.failed_fields())} field(s), "
            f"{len(report.failed_records())} record(s) failed"
        )

    return report
