"""Unit tests for the S3 object store backend."""

import pytest
from botocore.exceptions import ClientError
from botocore.stub import ANY, Stubber

from vaultlift.api.store.ObjectStore import ObjectStore
from vaultlift.api.store.StoreConfig import StoreConfig

pytestmark = pytest.mark.store

KEY = "attachments/photo-abc.png"


@pytest.fixture
def s3_store():
    config = StoreConfig(
        type="s3",
        prefix="attachments",
        data={
            "bucket": "notes",
            "region": "us-east-1",
            "access_key_id": "testing",
            "secret_access_key": "testing",
        },
    )
    with ObjectStore(config) as store:
        with Stubber(store.impl._client) as stubber:
            yield store, stubber
            stubber.assert_no_pending_responses()


def test_object_exists(s3_store):
    store, stubber = s3_store
    stubber.add_response("head_object", {"ContentLength": 3}, {"Bucket": "notes", "Key": KEY})

    assert store.object_exists(KEY)


def test_missing_object(s3_store):
    store, stubber = s3_store
    stubber.add_client_error(
        "head_object",
        service_error_code="404",
        http_status_code=404,
        expected_params={"Bucket": "notes", "Key": KEY},
    )

    assert not store.object_exists(KEY)


def test_other_errors_propagate(s3_store):
    store, stubber = s3_store
    stubber.add_client_error("head_object", service_error_code="403", http_status_code=403)

    with pytest.raises(ClientError):
        store.object_exists(KEY)


def test_upload_sends_content_type(s3_store):
    store, stubber = s3_store
    stubber.add_response(
        "put_object",
        {},
        {"Bucket": "notes", "Key": KEY, "Body": ANY, "ContentType": "image/png"},
    )

    store.upload(b"png", KEY, "image/png")


def test_list_keys(s3_store):
    store, stubber = s3_store
    stubber.add_response(
        "list_objects_v2",
        {"Contents": [{"Key": "attachments/b.pdf"}, {"Key": "attachments/a.png"}], "IsTruncated": False},
    )

    assert store.list_keys() == ["attachments/a.png", "attachments/b.pdf"]
