"""Mock MongoDB object store implementation using mongomock."""

from datetime import datetime, timezone

import mongomock
from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from ..StoreConfig import StoreConfig
from ._Data import _Data

# Shared mongomock client for all instances (singleton pattern)
_shared_mongomock_client: mongomock.MongoClient | None = None


def _get_mongomock_client() -> mongomock.MongoClient:
    """Get or create shared mongomock client."""
    global _shared_mongomock_client
    if _shared_mongomock_client is None:
        _shared_mongomock_client = mongomock.MongoClient()
    return _shared_mongomock_client


class _Impl(_AbstractImpl):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("MongoMock store config data is required")
        self.database_name = store_config.data.database
        self.collection_name = store_config.data.collection
        self._collection: Collection | None = None

    def __enter__(self):
        self._collection = _get_mongomock_client()[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close shared client - it's reused across instances
        self._collection = None
        return False

    def object_exists(self, key: str) -> bool:
        return self._collection.count_documents({"_id": key}) > 0  # type: ignore[union-attr]

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
