"""Custom exception hierarchy for dataaware."""

from __future__ import annotations


class DataAwareError(Exception):
    """Base exception for all dataaware errors."""


class DataNotFoundError(DataAwareError, LookupError):
    """Requested key is absent and the caller supplied no default.

    Callers that tolerate missing data should pass an explicit default
    (``None`` included) to ``get_data`` / ``get_raw_data`` instead.
    """

    def __init__(self, key: str, owner: str) -> None:
        self.key = key
        self.owner = owner
        super().__init__(
            f'No data item with the key "{key}" can be found in {owner}. '
            "Check your key name or provide a default value."
        )


class PropertyPathError(DataAwareError, ValueError):
    """Malformed bracket path, or a write the path cannot perform."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class InvalidDataError(DataAwareError, TypeError):
    """Input data is not a mapping."""
