"""Default options for attachment conversion."""

from __future__ import annotations

__all__ = ["ConvertConfig"]

import hashlib
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConvertConfig(BaseModel):
    """Defaults for ``convert run``; command-line flags override them."""

    model_config = ConfigDict(extra="forbid")

    scope: Literal["note", "folder", "vault"] = Field("note", description="Which notes to scan")
    dry_run: bool = Field(True, description="Preview changes without uploading or modifying notes")
    make_backup: bool = Field(True, description="Copy each note to a .bak sibling before modifying it")
    link_mode: Literal["proxy", "public"] = Field("proxy", description="How rewritten links are written")
    hash_algorithm: str = Field("sha1", description="hashlib algorithm used for content-addressed names")

    @field_validator("hash_algorithm")
    @classmethod
    def _validate_hash_algorithm(cls, v: str) -> str:
        v = v.lower()
        if v not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hash algorithm: {v!r}")
        return v
