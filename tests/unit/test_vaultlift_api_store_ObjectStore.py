"""Unit tests for vaultlift.api.store.ObjectStore backends and URL helpers."""

import uuid

import pytest

from vaultlift.api.store.ObjectStore import ObjectStore
from vaultlift.api.store.StoreConfig import StoreConfig

pytestmark = pytest.mark.store


@pytest.fixture
def mongomock_config():
    return StoreConfig(type="mongomock", prefix="att", data={"database": f"test_{uuid.uuid4().hex}"})


def test_directory_store_roundtrip(store, store_root):
    key = store.object_key("photo-abc.png")

    assert not store.object_exists(key)
    store.upload(b"data", key, "image/png")

    assert store.object_exists(key)
    assert (store_root / "attachments" / "photo-abc.png").read_bytes() == b"data"
    assert store.list_keys() == ["attachments/photo-abc.png"]


def test_directory_store_rejects_parent_segments(store):
    with pytest.raises(ValueError, match="Invalid object key"):
        store.upload(b"data", "../escape.png", "image/png")


def test_mongomock_store_roundtrip(mongomock_config):
    with ObjectStore(mongomock_config) as store:
        key = store.object_key("doc-abc.pdf")
        assert not store.object_exists(key)

        store.upload(b"v1", key, "application/pdf")
        store.upload(b"v1", key, "application/pdf")

        assert store.object_exists(key)
        assert store.list_keys() == ["att/doc-abc.pdf"]


def test_store_requires_context_manager(minimal_config):
    store = ObjectStore(minimal_config.store)

    with pytest.raises(RuntimeError, match="not initialized"):
        store.object_exists("x")


def test_object_key_without_prefix(tmp_path):
    store = ObjectStore(StoreConfig(type="directory", data={"root": str(tmp_path)}))

    assert store.object_key("a-1.png") == "a-1.png"


def test_urls_are_percent_encoded(minimal_config):
    store = ObjectStore(minimal_config.store)

    assert store.proxy_url("attachments/my photo-1.png") == "http://localhost:4998/attachments/my%20photo-1.png"
    assert store.public_url("attachments/a-1.png") == "https://cdn.example.com/files/attachments/a-1.png"
    assert store.public_url("a-1.png", base="https://other.example.com/") == "https://other.example.com/a-1.png"
    assert store.proxy_url("a-1.png", origin="http://127.0.0.1:9000") == "http://127.0.0.1:9000/a-1.png"


def test_public_url_without_base_is_none(tmp_path):
    store = ObjectStore(StoreConfig(type="directory", data={"root": str(tmp_path)}))

    assert store.public_url("a-1.png") is None
    assert store.url_bases() == ["http://localhost:4998"]


def test_url_bases(minimal_config):
    assert ObjectStore(minimal_config.store).url_bases() == ["https://cdn.example.com/files", "http://localhost:4998"]
