"""In-memory data bag with raw and normalized views.

A :class:`DataStore` keeps two trees side by side:

* ``raw`` - the input exactly as it was given,
* ``data`` - the same input after owner defaults were filled in and keys
  were camelCased.

Both are replaced by ``set_data`` and shallow-merged (top-level keys only)
by ``merge_data``. Reads resolve keys with
:func:`dataaware.resolver.resolve`.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from typing import Any, Final, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from dataaware._redact import redact_for_log
from dataaware.config import DataStoreConfig
from dataaware.defaults import apply_defaults
from dataaware.exceptions import DataNotFoundError, InvalidDataError
from dataaware.keys import normalize_keys as camelize_keys
from dataaware.resolver import resolve
from dataaware.tree import Tree, as_tree

_logger = logging.getLogger(__name__)

_MISSING: Final[Any] = object()

Key = str | Mapping[str, Any]
"""A path string, or a mapping of output keys to paths (nested allowed)."""

DefaultsSource = Callable[[], Any] | Mapping[str, Any] | BaseModel | None


@runtime_checkable
class DataAware(Protocol):
    """Capability of carrying a data bag with raw and normalized views."""

    def get_data(self, key: Key | None = None, default: Any = _MISSING) -> Any: ...

    def get_raw_data(self, key: Key | None = None, default: Any = _MISSING) -> Any: ...

    def has_data(self, key: Key) -> bool: ...

    def has_raw_data(self, key: Key) -> bool: ...

    def set_data(
        self,
        data: Any,
        normalize_keys: bool | None = None,
        apply_defaults: bool | None = None,
    ) -> Any: ...

    def merge_data(
        self,
        data: Any,
        normalize_keys: bool | None = None,
        apply_defaults: bool | None = None,
    ) -> Any: ...


class DataSnapshot(BaseModel):
    """Point-in-time copy of both views of a store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    owner: str
    raw_data: dict[Any, Any] = Field(default_factory=dict)
    data: dict[Any, Any] = Field(default_factory=dict)


class DataStore:
    """Raw and normalized data bag owned by a single object.

    Parameters
    ----------
    defaults
        Defaults strategy: a callable returning a tree, or a tree (mapping or
        Pydantic model) used as-is. ``None`` disables defaults.
    owner
        Name reported in :class:`~dataaware.exceptions.DataNotFoundError`.
        Defaults to the store's class name.
    config
        Values for ``normalize_keys`` / ``apply_defaults`` when a call
        leaves them as ``None``.
    """

    def __init__(
        self,
        defaults: DefaultsSource = None,
        *,
        owner: str | None = None,
        config: DataStoreConfig | None = None,
    ) -> None:
        self._defaults = defaults
        self._owner = owner or type(self).__name__
        self._config = config or DataStoreConfig()
        self._raw_data: dict[Any, Any] = {}
        self._data: dict[Any, Any] = {}

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def config(self) -> DataStoreConfig:
        return self._config

    def defaults(self) -> Tree:
        """Return the owner defaults tree (empty when none are configured)."""
        source = self._defaults
        if callable(source) and not isinstance(source, (Mapping, BaseModel)):
            source = source()
        if source is None:
            return {}
        return as_tree(source)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_data(self, key: Key | None = None, default: Any = _MISSING) -> Any:
        """Return the normalized value at *key*.

        Without *key* the whole normalized tree is returned. With a mapping
        ``{output_key: path}`` a dict of the same shape is returned; its
        defaults come from a parallel mapping in *default*, or *default*
        itself when it is not a mapping, and missing entries without a
        default become ``None``. A defaults mapping that has no entry for an
        output key also yields ``None`` for it; the defaults mapping itself
        is never used as a fallback value.

        Raises
        ------
        DataNotFoundError
            If a single *key* does not resolve and no *default* was passed.
        """
        return self._lookup(self._data, key, default)

    def get_raw_data(self, key: Key | None = None, default: Any = _MISSING) -> Any:
        """Same as :meth:`get_data`, against the raw input."""
        return self._lookup(self._raw_data, key, default)

    def has_data(self, key: Key) -> bool:
        return self._contains(self._data, key)

    def has_raw_data(self, key: Key) -> bool:
        return self._contains(self._raw_data, key)

    def snapshot(self) -> DataSnapshot:
        return DataSnapshot(
            owner=self._owner,
            raw_data=copy.deepcopy(self._raw_data),
            data=copy.deepcopy(self._data),
        )

    def _lookup(self, haystack: dict[Any, Any], key: Key | None, default: Any) -> Any:
        if key is None:
            return copy.deepcopy(haystack)

        if isinstance(key, Mapping):
            output: dict[Any, Any] = {}
            for output_key, data_key in key.items():
                if isinstance(default, Mapping):
                    entry_default = default.get(output_key)
                elif default is _MISSING:
                    entry_default = None
                else:
                    entry_default = default
                output[output_key] = self._lookup(haystack, data_key, entry_default)
            return output

        found = resolve(haystack, key)
        if found:
            return copy.deepcopy(found.value)

        if default is _MISSING:
            raise DataNotFoundError(key, self._owner)
        _logger.debug("Key %s not found in %s; using default", key, self._owner)
        return default

    def _contains(self, haystack: dict[Any, Any], key: Key) -> bool:
        if isinstance(key, Mapping):
            return all(self._contains(haystack, data_key) for data_key in key.values())
        if not isinstance(key, str):
            return False
        return resolve(haystack, key).found

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_data(
        self,
        data: Any,
        normalize_keys: bool | None = None,
        apply_defaults: bool | None = None,
    ) -> DataStore:
        """Replace both views with *data*.

        The raw view stores *data* unchanged. The normalized view gets the
        owner defaults (when *apply_defaults*) and camelCased keys (when
        *normalize_keys*). Flags left as ``None`` come from the config.
        """
        tree = self._coerce(data)
        normalize, defaults = self._flags(normalize_keys, apply_defaults)
        _logger.debug(
            "%s.set_data keys=%d normalize_keys=%s apply_defaults=%s data=%s",
            self._owner,
            len(tree),
            normalize,
            defaults,
            redact_for_log(tree),
        )
        self._raw_data = tree
        self._data = self._process(copy.deepcopy(tree), normalize, defaults)
        return self

    def merge_data(
        self,
        data: Any,
        normalize_keys: bool | None = None,
        apply_defaults: bool | None = None,
    ) -> DataStore:
        """Overlay *data* onto both views.

        Top-level keys of *data* replace same-named keys; nested subtrees
        are replaced whole, not merged. Defaults and normalization run on
        *data* alone before it is overlaid.
        """
        tree = self._coerce(data)
        normalize, defaults = self._flags(normalize_keys, apply_defaults)
        _logger.debug(
            "%s.merge_data keys=%d normalize_keys=%s apply_defaults=%s data=%s",
            self._owner,
            len(tree),
            normalize,
            defaults,
            redact_for_log(tree),
        )
        self._raw_data.update(tree)
        self._data.update(self._process(copy.deepcopy(tree), normalize, defaults))
        return self

    def _flags(self, normalize_keys: bool | None, apply_defaults: bool | None) -> tuple[bool, bool]:
        if normalize_keys is None:
            normalize_keys = self._config.normalize_keys
        if apply_defaults is None:
            apply_defaults = self._config.apply_defaults
        return normalize_keys, apply_defaults

    def _coerce(self, data: Any) -> dict[Any, Any]:
        tree = as_tree(data)
        if not isinstance(tree, dict):
            raise InvalidDataError(f"{self._owner} data must be a mapping, got {type(data).__name__}")
        return tree

    def _process(self, tree: dict[Any, Any], normalize: bool, defaults: bool) -> dict[Any, Any]:
        if defaults:
            default_tree = self.defaults()
            if default_tree:
                tree = apply_defaults(tree, default_tree)
        if normalize:
            tree = camelize_keys(tree)
        return tree
