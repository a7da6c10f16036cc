"""MongoDB object store configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uri: str = Field(..., description="MongoDB connection URI")
    database: str = Field("vaultlift", description="MongoDB database name")
    collection: str = Field("objects", description="MongoDB collection holding the objects")

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str) -> str:
        if not v:
            raise ValueError("store.data.uri is required when store.type is 'mongo'")
        return v
