"""Flatten a tree into ``{bracket_path: leaf}``."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from dataaware.property_path import format_path
from dataaware.tree import Step, is_container


def _children(node: Any) -> Iterator[Step]:
    if isinstance(node, Mapping):
        return (Step(key, False) for key in node)
    return (Step(index, True) for index in range(len(node)))


def iter_leaves(tree: Any) -> Iterator[tuple[tuple[Step, ...], Any]]:
    """Yield ``(steps, leaf)`` for every leaf of *tree*, depth-first.

    Each :class:`~dataaware.tree.Step` records whether it indexes a
    sequence, so the shape can be rebuilt with
    :func:`dataaware.property_path.set_steps`.
    """
    if not is_container(tree):
        return

    stack: list[tuple[tuple[Step, ...], Any, Iterator[Step]]] = [((), tree, _children(tree))]
    while stack:
        steps, node, children = stack[-1]
        step = next(children, None)
        if step is None:
            stack.pop()
            continue
        value = node[step.key]
        path = (*steps, step)
        if is_container(value):
            stack.append((path, value, _children(value)))
        else:
            yield path, value


def flatten_tree(tree: Any) -> dict[str, Any]:
    """Flatten *tree* into a new mapping of bracket paths to leaf values.

    Paths are emitted depth-first in encounter order, e.g.
    ``{"a": {"b": 1}, "c": [2]}`` becomes ``{"[a][b]": 1, "[c][0]": 2}``.
    Empty containers contribute nothing. A scalar root yields ``{}``.
    Keys that are empty or contain brackets produce paths ``parse_path``
    rejects; use :func:`iter_leaves` when such keys may occur.
    """
    return {format_path(steps): value for steps, value in iter_leaves(tree)}
