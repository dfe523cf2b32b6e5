"""Total lookups into decoded GitHub JSON payloads.

Event payloads are decoded without a schema, so any level may be a mapping,
a list, a scalar, or missing entirely. These helpers type-check each step and
fall back to ``None`` (or ``0`` for integers) instead of raising.
"""

from __future__ import annotations

import collections.abc as cabc
import math
import typing as typ


def get_mapping(container: object, key: str) -> cabc.Mapping[str, typ.Any] | None:
    """Return the nested mapping stored under ``key``, if any."""
    if not isinstance(container, cabc.Mapping):
        return None
    value = container.get(key)
    return value if isinstance(value, cabc.Mapping) else None


def get_string(container: object, key: str) -> str | None:
    """Return ``container[key]`` when it is a string.

    Examples
    --------
    >>> get_string({"action": "opened"}, "action")
    'opened'
    >>> get_string({"action": 1}, "action") is None
    True
    >>> get_string("not-a-mapping", "action") is None
    True

    """
    if not isinstance(container, cabc.Mapping):
        return None
    value = container.get(key)
    return value if isinstance(value, str) else None


def get_int(container: object, key: str) -> int:
    """Return the integer form of ``container[key]``, defaulting to ``0``.

    Integers and finite floats are accepted (floats are truncated). Booleans,
    strings, non-finite floats and anything else yield ``0``.

    Examples
    --------
    >>> get_int({"size": 3}, "size")
    3
    >>> get_int({"size": 2.9}, "size")
    2
    >>> get_int({"size": "3"}, "size")
    0

    """
    if not isinstance(container, cabc.Mapping):
        return 0
    value = container.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return 0


def get_nested_string(container: object, *path: str) -> str | None:
    """Follow ``path`` through nested mappings and return a string leaf.

    A missing or mistyped intermediate level short-circuits to ``None``.

    Examples
    --------
    >>> get_nested_string({"issue": {"title": "Bug"}}, "issue", "title")
    'Bug'
    >>> get_nested_string({"issue": "Bug"}, "issue", "title") is None
    True

    """
    if not path:
        return None
    *parents, leaf = path
    node: object = container
    for key in parents:
        node = get_mapping(node, key)
        if node is None:
            return None
    return get_string(node, leaf)


__all__ = ["get_int", "get_mapping", "get_nested_string", "get_string"]
