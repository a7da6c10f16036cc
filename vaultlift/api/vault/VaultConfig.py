"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., description="Vault backend type")
    base_dir: str = Field(..., description="Path to vault root directory")

    @field_validator("type")
    @classmethod
    def _validate_type(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported vault type: {v!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        return v

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from vaultlift.utils.expand_path import expand_path

        if not v:
            raise ValueError("vault.base_dir is required")
        return str(expand_path(v))


# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY = {
    "obsidian": "vaultlift.api.vault._obsidian",
}
