"""Dot-path helpers: read a value out of a nested value set, write a nested error tree."""

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

# Leaf values: a path never continues into their attributes
SCALAR_TYPES = (str, bytes, int, float, bool, complex)


def split_path(path: str, separator: str = ".") -> list[str]:
    """Split a field path into its segments."""
    return path.split(separator)


def get_path(values: Any, path: str, separator: str = ".") -> Any:
    """
    Resolve a field path inside a (possibly nested) value set.

    Segments are looked up by key in mappings, by index in sequences
    (numeric segments only) and by public attribute on other objects.
    Scalars end the walk. A missing segment anywhere along the way
    resolves to None.

    Args:
        values: The value set
        path: Field path, e.g. "address.street"
        separator: Segment separator

    Returns:
        The value at the path, or None
    """
    current = values
    for segment in split_path(path, separator):
        if current is None:
            return None

        if isinstance(current, Mapping):
            current = current.get(segment)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not segment.isdigit() or int(segment) >= len(current):
                return None
            current = current[int(segment)]
        elif isinstance(current, SCALAR_TYPES) or segment.startswith("_"):
            return None
        else:
            current = getattr(current, segment, None)

    return current


def set_path(
    tree: MutableMapping[str, Any], path: str, leaf: Any, separator: str = "."
) -> None:
    """
    Set a leaf in a nested dict, creating intermediate dicts on demand.

    Existing containers along the path are reused, so paths sharing a
    prefix end up as siblings in one container.
    """
    *parents, last = split_path(path, separator)

    node = tree
    for segment in parents:
        child = node.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            node[segment] = child
        node = child

    node[last] = leaf
