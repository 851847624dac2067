"""
Validation Schema - normalized, immutable field and record chains.

A schema definition is a mapping with two optional sections:

    {
        "field": {"username": [required, {"validator": min_length, "custom_args": {"length": 3}}]},
        "record": {"PASSWORDS_MATCH": [passwords_match]},
    }

ValidationSchema.build() normalizes every entry once. The resulting
snapshot is never mutated; SchemaStore.replace() swaps in a new one.
"""

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from formvalidation.core.chain import Chain
from formvalidation.core.descriptor import normalize_validator
from formvalidation.core.errors import SchemaDefinitionError

logger = logging.getLogger(__name__)


def _empty() -> Mapping[str, Chain]:
    return MappingProxyType({})


@dataclass(frozen=True)
class ValidationSchema:
    """Immutable snapshot of the field and record chains."""

    field: Mapping[str, Chain] = dataclasses.field(default_factory=_empty)
    record: Mapping[str, Chain] = dataclasses.field(default_factory=_empty)

    SECTIONS = ("field", "record")

    @classmethod
    def build(cls, definition: "ValidationSchema | Mapping[str, Any] | None") -> "ValidationSchema":
        """
        Normalize a schema definition into a snapshot.

        Args:
            definition: A ValidationSchema (returned as-is), a mapping with
                optional "field" and "record" sections, or None

        Returns:
            The normalized ValidationSchema

        Raises:
            SchemaDefinitionError: If the definition or an entry is malformed
        """
        if isinstance(definition, ValidationSchema):
            return definition

        if definition is None:
            return cls()

        if not isinstance(definition, Mapping):
            raise SchemaDefinitionError(
                f"Schema definition must be a mapping, got: {type(definition).__name__}"
            )

        unknown = set(definition) - set(cls.SECTIONS)
        if unknown:
            raise SchemaDefinitionError(
                f"Unknown schema sections: {sorted(unknown)}. Allowed: {list(cls.SECTIONS)}"
            )

        return cls(
            field=cls._build_section(definition.get("field")),
            record=cls._build_section(definition.get("record")),
        )

    @staticmethod
    def _build_section(section: Any) -> Mapping[str, Chain]:
        """Normalize one section (key -> list of validator entries)."""
        if section is None:
            return MappingProxyType({})

        if not isinstance(section, Mapping):
            raise SchemaDefinitionError(
                f"Schema section must be a mapping, got: {type(section).__name__}"
            )

        chains: dict[str, Chain] = {}
        for key, entries in section.items():
            if not isinstance(key, str) or not key:
                raise SchemaDefinitionError(
                    f"Schema keys must be non-empty strings, got: {key!r}", key
                )
            if entries is None:
                chains[key] = ()
                continue
            if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
                raise SchemaDefinitionError(
                    f"Validators for {key!r} must be a list, got: {type(entries).__name__}",
                    key,
                )
            chains[key] = tuple(normalize_validator(entry, key) for entry in entries)

        return MappingProxyType(chains)


class SchemaStore:
    """
    Holds the current schema snapshot of one validation instance.

    Readers take `snapshot` once and keep using that reference;
    replace() never touches a snapshot already handed out.
    """

    def __init__(self, definition: ValidationSchema | Mapping[str, Any] | None = None) -> None:
        self._snapshot = ValidationSchema.build(definition)

    @property
    def snapshot(self) -> ValidationSchema:
        """The current schema."""
        return self._snapshot

    def replace(self, definition: ValidationSchema | Mapping[str, Any] | None) -> None:
        """
        Replace the schema wholesale.

        Args:
            definition: The full new schema; nothing is merged from the old one
        """
        snapshot = ValidationSchema.build(definition)
        self._snapshot = snapshot
        logger.debug(
            f"Schema replaced: {len(snapshot.field)} fields, {len(snapshot.record)} records"
        )
