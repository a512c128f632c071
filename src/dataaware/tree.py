"""Tree values and lookup results.

A tree is any nesting of mappings, sequences and scalars. Input may carry
richer container types (Pydantic models, dataclasses, tuples); ``as_tree``
reduces them to plain ``dict`` / ``list`` / scalar values before they are
stored.
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from typing import Any, Final, NamedTuple

from pydantic import BaseModel

Tree = Any
"""A scalar, a list of trees, or a dict mapping keys to trees."""


class Step(NamedTuple):
    """One hop of a path: the key, and whether it indexes a sequence.

    ``in_sequence`` is ``None`` when the kind is unknown, as for segments
    parsed from a bracket string.
    """

    key: Any
    in_sequence: bool | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of looking up a path: either found with a value, or not found."""

    found: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.found

    @classmethod
    def hit(cls, value: Any) -> Resolution:
        return cls(True, value)


NOT_FOUND: Final[Resolution] = Resolution(False)


def as_tree(value: Any) -> Tree:
    """Convert common model/container types into a plain tree."""
    if isinstance(value, BaseModel):
        return as_tree(value.model_dump(by_alias=True))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {k: as_tree(v) for k, v in dataclasses.asdict(value).items()}
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: as_tree(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [as_tree(v) for v in value]
    return value


def is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))
