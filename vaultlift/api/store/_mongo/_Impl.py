"""MongoDB object store implementation."""

from datetime import datetime, timezone
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        """Initialize MongoDB implementation.

        Each object is one document keyed by its object key.
        """
        if not isinstance(store_config.data, _Data):
            raise ValueError("MongoDB store config data is required")
        self.uri = store_config.data.uri
        self.database_name = store_config.data.database
        self.collection_name = store_config.data.collection
        self._client: MongoClient[Any] | None = None
        self._collection: Collection | None = None

    def __enter__(self):
        self._client = MongoClient(self.uri, serverSelectionTimeoutMS=5000)
        self._client.server_info()  # Test connection
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
        self._collection = None
        return False

    def object_exists(self, key: str) -> bool:
        return self._collection.count_documents({"_id": key}, limit=1) > 0  # type: ignore[union-attr]

    def upload(self, data: bytes, key: str, content_type: str) -> None:
        self._collection.replace_one(  # type: ignore[union-attr]
            {"_id": key},
            {
                "_id": key,
                "data": data,
                "content_type": content_type,
                "size": len(data),
                "uploaded_at": datetime.now(timezone.utc).isoformat(),
            },
            upsert=True,
        )

    def list_keys(self) -> list[str]:
        return sorted(doc["_id"] for doc in self._collection.find({}, {"_id": 1}))  # type: ignore[union-attr]
