"""S3 object store implementation."""

from typing import Any

import boto3
from botocore.exceptions import ClientError

from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ._Data import _Data

_MISSING_CODES = ("404", "NoSuchKey", "NotFound")


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        """Initialize S3 implementation.

        Empty region, endpoint and credentials fall through to boto3's own
        resolution (environment, shared config, instance profile).
        """
        if not isinstance(store_config.data, _Data):
            raise ValueError("S3 store config data is required")
        self.data = store_config.data
        self._client: Any = None

    def __enter__(self):
        self._client = boto3.client(
            "s3",
            region_name=self.data.region or None,
            endpoint_url=self.data.endpoint_url or None,
            aws_access_key_id=self.data.access_key_id or None,
            aws_secret_access_key=self.data.secret_access_key or None,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client is not None:
            self._client.close()
        self._client = None
        return False

    def object_exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self.data.bucket, Key=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise
        return True

    def upload(self, data: bytes, key: str, content_type: str) -> None:
        self._client.put_object(Bucket=self.data.bucket, Key=key, Body=data, ContentType=content_type)

    def list_keys(self) -> list[str]:
        keys: list[str] = []
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.data.bucket):
            keys.extend(item["Key"] for item in page.get("Contents", []))
        return sorted(keys)
