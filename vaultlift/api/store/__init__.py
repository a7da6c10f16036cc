"""Object store API module."""

from .ObjectStore import ObjectStore
from .StoreConfig import StoreConfig

__all__ = ["ObjectStore", "StoreConfig"]
