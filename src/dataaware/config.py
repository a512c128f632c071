"""Store configuration for dataaware."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class DataStoreConfig:
    """Pipeline defaults for a :class:`~dataaware.store.DataStore`.

    Parameters
    ----------
    normalize_keys : bool
        camelCase every mapping key of the working copy when the caller
        does not say otherwise.
    apply_defaults : bool
        Fill missing or empty input values from the owner defaults when
        the caller does not say otherwise.
    """

    normalize_keys: bool = True
    apply_defaults: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> DataStoreConfig:
        """Create configuration from environment variables.

        Reads ``DATAAWARE_NORMALIZE_KEYS`` and ``DATAAWARE_APPLY_DEFAULTS``.
        Unrecognised values fall back to the field default. Explicit
        keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "DATAAWARE_NORMALIZE_KEYS": "normalize_keys",
            "DATAAWARE_APPLY_DEFAULTS": "apply_defaults",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            if field_name not in overrides:
                config_kwargs[field_name] = _env_bool(env.get(env_key), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
