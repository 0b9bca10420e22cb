import pytest
from unittest.mock import MagicMock
from botocore.exceptions import ClientError

from app.settings import Settings
from app.errors import StorageError, ConfigurationError
from app.services.storage_service import LocalObjectStore, S3ObjectStore, get_object_store

def client_error(code, operation="HeadObject"):
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)

def test_local_put_writes_file_and_returns_url(tmp_path):
    store = LocalObjectStore(root=tmp_path / "uploads", url_prefix="/uploads/")

    url = store.put("photos/u1/p1.jpg", b"datos", "image/jpeg")

    assert url == "/uploads/photos/u1/p1.jpg"
    assert (tmp_path / "uploads" / "photos" / "u1" / "p1.jpg").read_bytes() == b"datos"

def test_local_delete_reports_missing_objects(tmp_path):
    store = LocalObjectStore(root=tmp_path)
    store.put("a/b.png", b"x", "image/png")

    assert store.delete("a/b.png") is True
    assert store.delete("a/b.png") is False
    assert not (tmp_path / "a" / "b.png").exists()

@pytest.mark.parametrize("key", ["../fuera.jpg", "photos/../../fuera.jpg"])
def test_local_rejects_keys_outside_root(tmp_path, key):
    store = LocalObjectStore(root=tmp_path / "uploads")

    with pytest.raises(StorageError):
        store.put(key, b"x", "image/jpeg")
    assert not (tmp_path / "fuera.jpg").exists()

def test_s3_put_uploads_with_content_type():
    client = MagicMock()
    store = S3ObjectStore(bucket="fotos", public_base="https://cdn.example.com/", client=client)

    url = store.put("photos/u1/p1.jpg", b"datos", "image/jpeg")

    assert url == "https://cdn.example.com/photos/u1/p1.jpg"
    client.put_object.assert_called_once_with(
        Bucket="fotos", Key="photos/u1/p1.jpg", Body=b"datos", ContentType="image/jpeg"
    )

def test_s3_put_failure_raises_storage_error():
    client = MagicMock()
    client.put_object.side_effect = client_error("AccessDenied", "PutObject")
    store = S3ObjectStore(bucket="fotos", public_base="https://cdn.example.com", client=client)

    with pytest.raises(StorageError):
        store.put("k", b"x", "image/png")

def test_s3_delete_existing_object():
    client = MagicMock()
    store = S3ObjectStore(bucket="fotos", public_base="https://cdn.example.com", client=client)

    assert store.delete("k") is True
    client.delete_object.assert_called_once_with(Bucket="fotos", Key="k")

@pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
def test_s3_delete_missing_object_returns_false(code):
    client = MagicMock()
    client.head_object.side_effect = client_error(code)
    store = S3ObjectStore(bucket="fotos", public_base="https://cdn.example.com", client=client)

    assert store.delete("k") is False
    client.delete_object.assert_not_called()

def test_s3_delete_other_errors_raise_storage_error():
    client = MagicMock()
    client.head_object.side_effect = client_error("403")
    store = S3ObjectStore(bucket="fotos", public_base="https://cdn.example.com", client=client)

    with pytest.raises(StorageError):
        store.delete("k")

def test_factory_builds_local_store(tmp_path):
    settings = Settings(SECRET_KEY="x", BASE_PATH=tmp_path, OBJECT_STORE_BACKEND="local")

    assert isinstance(get_object_store(settings), LocalObjectStore)

def test_factory_requires_s3_settings(tmp_path):
    settings = Settings(SECRET_KEY="x", BASE_PATH=tmp_path, OBJECT_STORE_BACKEND="s3", S3_BUCKET="fotos")

    with pytest.raises(ConfigurationError) as exc_info:
        get_object_store(settings)
    assert exc_info.value.details["missing_fields"] == ["S3_PUBLIC_BASE"]
