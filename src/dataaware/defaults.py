"""Fill missing or empty values of a tree from a defaults tree."""

from __future__ import annotations

import logging
from typing import Any

from dataaware.flatten import iter_leaves
from dataaware.property_path import format_path, get_steps, set_steps

_logger = logging.getLogger(__name__)


def apply_defaults(data: Any, defaults: Any) -> Any:
    """Write every default leaf into *data* where *data* has nothing useful.

    A value counts as missing when its path does not resolve, or when it is
    falsy (``None``, ``""``, ``0``, ``False``, an empty container). Missing
    intermediates are created with the container kind the defaults use at
    that point. *data* is modified in place and returned.

    Raises
    ------
    PropertyPathError
        If a default would have to be written through a non-empty scalar.
    """
    for steps, default_value in iter_leaves(defaults):
        current = get_steps(data, steps)
        if current.found and current.value:
            continue
        _logger.debug("Applying default at %s", format_path(steps))
        set_steps(data, steps, default_value)
    return data
