"""Vault API module."""

from .Vault import Vault
from .VaultConfig import VaultConfig

__all__ = ["Vault", "VaultConfig"]
