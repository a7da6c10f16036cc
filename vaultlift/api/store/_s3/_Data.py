"""S3 object store configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid")

    bucket: str = Field(..., description="Bucket objects are written to")
    region: str = Field("", description="Bucket region (empty uses the AWS default)")
    endpoint_url: str = Field("", description="Custom endpoint for S3-compatible services")
    access_key_id: str = Field("", description="Access key (empty uses the AWS credential chain)")
    secret_access_key: str = Field("", description="Secret key paired with access_key_id")

    @field_validator("bucket")
    @classmethod
    def validate_bucket(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("store.data.bucket is required when store.type is 's3'")
        return v.strip()

    @field_validator("endpoint_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")
