"""Mock MongoDB object store configuration data for testing."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid")

    database: str = Field("vaultlift", description="Mock database name")
    collection: str = Field("objects", description="Mock collection holding the objects")
