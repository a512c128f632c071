"""dataaware - raw and camelCase-normalized access to nested data bags."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dataaware")
except PackageNotFoundError:
    __version__ = "0+local"
from dataaware.config import DataStoreConfig
from dataaware.defaults import apply_defaults
from dataaware.exceptions import (
    DataAwareError,
    DataNotFoundError,
    InvalidDataError,
    PropertyPathError,
)
from dataaware.flatten import flatten_tree, iter_leaves
from dataaware.host import DataHolder
from dataaware.keys import normalize_keys, normalize_string
from dataaware.resolver import is_resolvable, resolve
from dataaware.store import DataAware, DataSnapshot, DataStore
from dataaware.tree import NOT_FOUND, Resolution, Step, as_tree

__all__ = [
    "__version__",
    "NOT_FOUND",
    "DataAware",
    "DataAwareError",
    "DataHolder",
    "DataNotFoundError",
    "DataSnapshot",
    "DataStore",
    "DataStoreConfig",
    "InvalidDataError",
    "PropertyPathError",
    "Resolution",
    "Step",
    "apply_defaults",
    "as_tree",
    "flatten_tree",
    "is_resolvable",
    "iter_leaves",
    "normalize_keys",
    "normalize_string",
    "resolve",
]
