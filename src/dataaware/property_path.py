"""Bracket property-path access: ``[key][0][nested]``.

Every segment is wrapped in brackets; nothing may appear outside them.
A segment addresses a mapping key or, for sequences, a non-negative
integer index. Mapping lookups try the segment as a string first and fall
back to an integer key when the segment is an integer literal.

String paths cannot say whether a segment came from a mapping or a
sequence, so ``set_value`` creates missing intermediates as dicts. Callers
that know the shape (defaults application) write through typed
:class:`~dataaware.tree.Step` tuples with ``get_steps`` / ``set_steps``,
which also reach keys that bracket syntax cannot express (``""``, keys
containing ``[`` or ``]``).
"""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from dataaware.exceptions import PropertyPathError
from dataaware.tree import NOT_FOUND, Resolution, Step

_SEGMENT_RE = re.compile(r"\[([^\[\]]+)\]")
_INDEX_RE = re.compile(r"\d+")


def parse_path(path: str) -> tuple[str, ...]:
    """Split *path* into its bracket segments.

    Raises
    ------
    PropertyPathError
        If *path* is empty, contains text outside brackets, or has an
        empty or nested segment.
    """
    segments: list[str] = []
    pos = 0
    for match in _SEGMENT_RE.finditer(path):
        if match.start() != pos:
            break
        segments.append(match.group(1))
        pos = match.end()
    if not segments or pos != len(path):
        raise PropertyPathError(f'Invalid property path "{path}"', path=path)
    return tuple(segments)


def _index(segment: str) -> int | None:
    return int(segment) if _INDEX_RE.fullmatch(segment) else None


def _read(container: Any, segment: str) -> Resolution:
    if isinstance(container, Mapping):
        if segment in container:
            return Resolution.hit(container[segment])
        index = _index(segment)
        if index is not None and index in container:
            return Resolution.hit(container[index])
        return NOT_FOUND
    if isinstance(container, (list, tuple)):
        index = _index(segment)
        if index is not None and index < len(container):
            return Resolution.hit(container[index])
    return NOT_FOUND


def get_value(tree: Any, path: str) -> Resolution:
    """Read the value at *path*; malformed paths resolve to ``NOT_FOUND``."""
    try:
        segments = parse_path(path)
    except PropertyPathError:
        return NOT_FOUND

    current = tree
    for segment in segments:
        step = _read(current, segment)
        if not step.found:
            return NOT_FOUND
        current = step.value
    return Resolution.hit(current)


def is_readable(tree: Any, path: str) -> bool:
    return get_value(tree, path).found


def format_path(steps: Sequence[Step]) -> str:
    return "".join(f"[{step.key}]" for step in steps)


def _read_step(container: Any, step: Step) -> Resolution:
    if isinstance(container, Mapping) and step.key in container:
        return Resolution.hit(container[step.key])
    return _read(container, str(step.key))


def get_steps(tree: Any, steps: Sequence[Step]) -> Resolution:
    """Read the value reached by *steps*; keys are matched as given."""
    current = tree
    for step in steps:
        found = _read_step(current, step)
        if not found.found:
            return NOT_FOUND
        current = found.value
    return Resolution.hit(current)


def _list_index(key: Any) -> int | None:
    if isinstance(key, int) and not isinstance(key, bool):
        return key if key >= 0 else None
    if isinstance(key, str):
        return _index(key)
    return None


def _write(container: Any, key: Any, value: Any, path: str) -> None:
    if isinstance(container, MutableMapping):
        index = _index(key) if isinstance(key, str) else None
        if key not in container and index is not None and index in container:
            container[index] = value
        else:
            container[key] = value
        return
    if isinstance(container, list):
        index = _list_index(key)
        if index is None:
            raise PropertyPathError(f'Cannot write key "{key}" into a list at "{path}"', path=path)
        while len(container) < index:
            container.append(None)
        if index == len(container):
            container.append(value)
        else:
            container[index] = value
        return
    raise PropertyPathError(
        f'Cannot write "{key}" into {type(container).__name__} at "{path}"',
        path=path,
    )


def _fits(container: Any, next_step: Step) -> bool:
    if next_step.in_sequence:
        return isinstance(container, list)
    if next_step.in_sequence is None and isinstance(container, list):
        return _list_index(next_step.key) is not None
    return isinstance(container, Mapping)


def set_steps(tree: Any, steps: Sequence[Step], value: Any) -> None:
    """Write *value* at the location reached by *steps*.

    A missing intermediate becomes a list when the following step indexes
    a sequence, and a dict otherwise. A step of unknown kind accepts an
    existing list when its key is an integer. An empty intermediate of the wrong
    kind (``None``, ``""``, an empty list where a mapping is needed, ...)
    is replaced the same way. Writing through a non-empty scalar raises
    :class:`PropertyPathError`.
    """
    path = format_path(steps)
    current = tree
    for step, next_step in zip(steps, steps[1:]):
        found = _read_step(current, step)
        child = found.value
        if not found.found or (not child and not _fits(child, next_step)):
            child = [] if next_step.in_sequence else {}
            _write(current, step.key, child, path)
        elif isinstance(child, tuple):
            child = list(child)
            _write(current, step.key, child, path)
        current = child
    _write(current, steps[-1].key, value, path)


def set_value(tree: Any, path: str, value: Any) -> None:
    """Write *value* at bracket *path*, creating missing intermediates as dicts.

    Existing lists along the path are indexed by integer segments.
    """
    set_steps(tree, tuple(Step(segment) for segment in parse_path(path)), value)
