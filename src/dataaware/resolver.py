"""Key resolution against a tree.

A key is tried, in order, as

1. an exact mapping key (``"a.b"`` stored verbatim wins over traversal),
2. a dot path (``"a.b.c"``), walking mappings only,
3. a bracket property path (``"[a][0][c]"``).

The first strategy that finds a value wins. Lookups never raise; callers
inspect the returned :class:`~dataaware.tree.Resolution`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dataaware import property_path
from dataaware.tree import NOT_FOUND, Resolution


def _exact(haystack: Any, key: str) -> Resolution:
    if isinstance(haystack, Mapping) and key in haystack:
        return Resolution.hit(haystack[key])
    return NOT_FOUND


def _dotted(haystack: Any, key: str) -> Resolution:
    current = haystack
    for segment in key.split("."):
        if not isinstance(current, Mapping) or segment not in current:
            return NOT_FOUND
        current = current[segment]
    return Resolution.hit(current)


def resolve(haystack: Any, key: str) -> Resolution:
    """Resolve *key* against *haystack*."""
    found = _exact(haystack, key)
    if found:
        return found

    if "." in key:
        found = _dotted(haystack, key)
        if found:
            return found

    if "[" in key:
        return property_path.get_value(haystack, key)

    return NOT_FOUND


def is_resolvable(haystack: Any, key: str) -> bool:
    return resolve(haystack, key).found
