"""Config API module."""

from .VaultliftConfig import VaultliftConfig

__all__ = ["VaultliftConfig"]
