"""Directory object store configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid")

    root: str = Field(..., description="Directory objects are written to")

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        from vaultlift.utils.expand_path import expand_path

        if not v:
            raise ValueError("store.data.root is required when store.type is 'directory'")
        return str(expand_path(v))
