"""Base class for objects that carry a data bag."""

from __future__ import annotations

from typing import Any, ClassVar

from dataaware.config import DataStoreConfig
from dataaware.store import _MISSING, DataStore, DefaultsSource, Key


class DataHolder:
    """Expose a :class:`DataStore` on an object's public surface.

    The store is held by composition. Subclasses supply defaults either by
    passing ``defaults=`` or by setting the ``data_defaults`` class
    attribute::

        class Widget(DataHolder):
            data_defaults = {"size": "medium", "colors": {"fg": "black"}}

        widget = Widget().set_data({"label text": "OK"})
        widget.get_data("labelText")  # "OK"
        widget.get_data("colors.fg")  # "black"

    Passing ``defaults=None`` switches the class defaults off for one
    instance.
    """

    data_defaults: ClassVar[DefaultsSource] = None

    def __init__(
        self,
        *,
        defaults: DefaultsSource | object = _MISSING,
        config: DataStoreConfig | None = None,
    ) -> None:
        self._store = DataStore(
            type(self).data_defaults if defaults is _MISSING else defaults,
            owner=type(self).__name__,
            config=config,
        )

    @property
    def store(self) -> DataStore:
        return self._store

    def get_data(self, key: Key | None = None, default: Any = _MISSING) -> Any:
        return self._store.get_data(key, default)

    def get_raw_data(self, key: Key | None = None, default: Any = _MISSING) -> Any:
        return self._store.get_raw_data(key, default)

    def has_data(self, key: Key) -> bool:
        return self._store.has_data(key)

    def has_raw_data(self, key: Key) -> bool:
        return self._store.has_raw_data(key)

    def set_data(
        self,
        data: Any,
        normalize_keys: bool | None = None,
        apply_defaults: bool | None = None,
    ) -> DataHolder:
        self._store.set_data(data, normalize_keys, apply_defaults)
        return self

    def merge_data(
        self,
        data: Any,
        normalize_keys: bool | None = None,
        apply_defaults: bool | None = None,
    ) -> DataHolder:
        self._store.merge_data(data, normalize_keys, apply_defaults)
        return self
