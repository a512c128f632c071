"""camelCase key normalization.

Keys of decoded input arrive in whatever style the producer used
(``"test one"``, ``"test-two"``, ``"api_key"``). Normalization renames every
string mapping key to camelCase so lookups can rely on a single style.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from typing import Any

_DELIMITERS = frozenset(" _-\\/.")
_ASCII_UPPER = frozenset(string.ascii_uppercase)


def _is_upper(text: str) -> bool:
    return bool(text) and all(ch in _ASCII_UPPER for ch in text)


def _capitalize_words(text: str) -> str:
    chars: list[str] = []
    at_boundary = True
    for ch in text:
        if at_boundary and "a" <= ch <= "z":
            ch = ch.upper()
        chars.append(ch)
        at_boundary = ch in _DELIMITERS
    return "".join(chars)


def normalize_string(value: str) -> str:
    """Convert *value* into camelCase.

    Inputs that start with an acronym keep their leading capitals, so
    ``"URLPath"`` stays ``"URLPath"`` while ``"test one"`` becomes
    ``"testOne"``.
    """
    acronym_leading = _is_upper(value[:2])
    camel = "".join(ch for ch in _capitalize_words(value) if ch not in _DELIMITERS)

    if not acronym_leading or (not _is_upper(camel) and not _is_upper(camel[1:2])):
        camel = camel[:1].lower() + camel[1:]
    return camel


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def normalize_keys(tree: Any) -> Any:
    """Return a copy of *tree* with every string mapping key camelCased.

    Sequences keep their shape; their elements are normalized. Scalars are
    returned unchanged. When two keys of one mapping normalize to the same
    name the later one wins.
    """
    if isinstance(tree, Mapping):
        root: Any = {}
    elif _is_sequence(tree):
        root = []
    else:
        return tree

    # Explicit work stack; containers are linked into their parent before
    # they are filled, so insertion order is preserved.
    stack: list[tuple[Any, Any]] = [(tree, root)]
    while stack:
        source, target = stack.pop()
        if isinstance(source, Mapping):
            for key, value in source.items():
                if isinstance(key, str):
                    key = normalize_string(key)
                target[key] = _link_child(value, stack)
        else:
            for value in source:
                target.append(_link_child(value, stack))
    return root


def _link_child(value: Any, stack: list[tuple[Any, Any]]) -> Any:
    if isinstance(value, Mapping):
        child: Any = {}
    elif _is_sequence(value):
        child = []
    else:
        return value
    stack.append((value, child))
    return child
