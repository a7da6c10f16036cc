"""Object store configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ._directory._Data import _Data as _DirectoryData
from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData
from ._s3._Data import _Data as _S3Data

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "directory": _DirectoryData,
    "mongo": _MongoData,
    "mongomock": _MongomockData,
    "s3": _S3Data,
}


class StoreConfig(BaseModel):
    type: str = Field(..., description="Object store backend type")
    prefix: str = Field("", description="Key prefix (folder) for uploaded objects")
    public_base_url: str = Field("", description="Base URL objects are publicly served from")
    proxy_url: str = Field("http://localhost:4998", description="Origin of the local retrieval proxy")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"store config must be a dict, got {type(values).__name__}")
        store_type = values.get("type")
        if not store_type:
            raise ValueError("store.type is required")
        config_data_class = _BACKEND_REGISTRY.get(store_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {store_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data_dict = values.get("data")
        if data_dict is None:
            raise ValueError("store.data is required")
        if not isinstance(data_dict, BaseModel):
            values = {**values, "data": config_data_class(**data_dict)}
        return values

    @field_validator("prefix")
    @classmethod
    def _strip_prefix(cls, v: str) -> str:
        return v.strip().strip("/")

    @field_validator("public_base_url", "proxy_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
