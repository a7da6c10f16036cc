"""Top-level vaultlift configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILENAME
from ..convert.ConvertConfig import ConvertConfig
from ..mime.MimeConfig import MimeConfig
from ..store.StoreConfig import StoreConfig
from ..vault.VaultConfig import VaultConfig


class VaultliftConfig(BaseModel):
    """Top-level configuration for vaultlift layers."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig
    store: StoreConfig | None = None
    mime: MimeConfig = Field(default_factory=MimeConfig)
    convert: ConvertConfig = Field(default_factory=ConvertConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get vaultlift home directory based on VAULTLIFT_HOME or default to ~/.vaultlift."""
        from ...utils.get_home_dir import get_home_dir

        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / CONFIG_FILENAME

    @classmethod
    def load(cls) -> "VaultliftConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary for serialization."""
        return {
            "vault": self.vault.model_dump(),
            "store": self.store.model_dump() if self.store is not None else None,
            "mime": self.mime.model_dump(),
            "convert": self.convert.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
