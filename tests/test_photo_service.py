import pytest
from uuid import uuid4
from sqlalchemy import select, func

from app.enums import Visibility, LikeTargetType
from app.errors import ValidationError, ResourceNotFoundError, PermissionDeniedError, StorageError
from app.schemas import LikeTarget
from app.settings import settings
from app.services.likes_service import LikesService
from app.services.photos_service import PhotosService
from app.database.models.likes_model import LikeDatabaseModel
from app.database.models.photos_model import PhotoDatabaseModel

def test_upload_photo_full_workflow(db_session, object_store, make_user, jpeg_bytes):
    # 1. Necesitamos un usuario real en la DB para que el FK de la foto no falle
    user = make_user()
    photo_service = PhotosService(db_session, object_store)

    # 2. Ejecutar el servicio
    photo_res = photo_service.upload_photo(
        owner_id=user.id,
        data=jpeg_bytes,
        title="Vacaciones",
        description="Mi primera foto"
    )

    # 3. Aseveraciones
    assert photo_res.description == "Mi primera foto"
    assert photo_res.visibility == Visibility.PRIVATE

    (key,) = object_store.objects.keys()
    assert key.startswith(f"photos/{user.id}/")
    assert key.endswith(".jpg")
    assert object_store.objects[key] == (jpeg_bytes, "image/jpeg")
    assert photo_res.file_url == f"/uploads/{key}"

    stored = db_session.get(PhotoDatabaseModel, photo_res.id)
    assert stored.storage_key == key

def test_upload_detects_format_from_content(db_session, object_store, make_user, png_bytes):
    user = make_user()

    PhotosService(db_session, object_store).upload_photo(owner_id=user.id, data=png_bytes)

    (key,) = object_store.objects.keys()
    assert key.endswith(".png")
    assert object_store.objects[key][1] == "image/png"

@pytest.mark.parametrize("data", [b"", b"esto no es una imagen", b"\x89PNG\r\n\x1a\nroto"])
def test_upload_rejects_invalid_content(db_session, object_store, make_user, data):
    user = make_user()

    with pytest.raises(ValidationError):
        PhotosService(db_session, object_store).upload_photo(owner_id=user.id, data=data)
    assert object_store.objects == {}

def test_upload_rejects_oversized_file(db_session, object_store, make_user, jpeg_bytes, monkeypatch):
    user = make_user()
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", len(jpeg_bytes) - 1)

    with pytest.raises(ValidationError):
        PhotosService(db_session, object_store).upload_photo(owner_id=user.id, data=jpeg_bytes)

def test_storage_failure_on_upload_leaves_no_row(db_session, object_store, make_user, jpeg_bytes):
    user = make_user()
    object_store.fail_put = True

    with pytest.raises(StorageError):
        PhotosService(db_session, object_store).upload_photo(owner_id=user.id, data=jpeg_bytes)

    assert db_session.execute(select(func.count(PhotoDatabaseModel.id))).scalar_one() == 0

def test_private_photo_is_forbidden_to_others(db_session, object_store, make_user, make_photo):
    owner, stranger = make_user(), make_user()
    photo = make_photo(owner, visibility=Visibility.PRIVATE)
    service = PhotosService(db_session, object_store)

    assert service.get_photo(photo.id, owner.id).id == photo.id
    with pytest.raises(PermissionDeniedError):
        service.get_photo(photo.id, stranger.id)
    with pytest.raises(PermissionDeniedError):
        service.get_photo(photo.id, None)

def test_missing_photo_is_not_found(db_session, object_store, make_user):
    with pytest.raises(ResourceNotFoundError):
        PhotosService(db_session, object_store).get_photo(uuid4(), make_user().id)

def test_change_visibility_only_by_owner(db_session, object_store, make_user, make_photo):
    owner, stranger = make_user(), make_user()
    photo = make_photo(owner, visibility=Visibility.PRIVATE)
    service = PhotosService(db_session, object_store)

    with pytest.raises(PermissionDeniedError):
        service.change_visibility(photo.id, stranger.id, Visibility.PUBLIC)

    updated = service.change_visibility(photo.id, owner.id, Visibility.PUBLIC)
    assert updated.visibility == Visibility.PUBLIC
    assert service.get_photo(photo.id, stranger.id).id == photo.id

def test_add_and_remove_from_album(db_session, object_store, make_user, make_photo, make_album):
    owner = make_user()
    photo = make_photo(owner)
    album = make_album(owner)
    service = PhotosService(db_session, object_store)

    membership = service.add_to_album(photo.id, album.id, owner.id)
    assert (membership.photo_id, membership.album_id) == (photo.id, album.id)

    assert service.remove_from_album(photo.id, album.id, owner.id) is True
    with pytest.raises(ResourceNotFoundError):
        service.remove_from_album(photo.id, album.id, owner.id)

def test_delete_photo_removes_blob_likes_and_memberships(db_session, object_store, make_user, make_album, jpeg_bytes):
    owner, fan = make_user(), make_user()
    service = PhotosService(db_session, object_store)
    photo = service.upload_photo(owner_id=owner.id, data=jpeg_bytes, visibility=Visibility.PUBLIC)
    album = make_album(owner)
    service.add_to_album(photo.id, album.id, owner.id)
    LikesService(db_session).add_like(fan.id, LikeTarget(type=LikeTargetType.PHOTO, id=photo.id))

    assert service.delete_photo(photo.id, owner.id) is True

    assert object_store.objects == {}
    assert db_session.get(PhotoDatabaseModel, photo.id) is None
    assert db_session.execute(
        select(func.count(LikeDatabaseModel.id)).where(LikeDatabaseModel.photo_id == photo.id)
    ).scalar_one() == 0
    with pytest.raises(ResourceNotFoundError):
        service.get_photo(photo.id, owner.id)

def test_delete_photo_survives_storage_failure(db_session, object_store, make_user, jpeg_bytes, caplog):
    owner = make_user()
    service = PhotosService(db_session, object_store)
    photo = service.upload_photo(owner_id=owner.id, data=jpeg_bytes)
    object_store.fail_delete = True

    assert service.delete_photo(photo.id, owner.id) is True

    # Los metadatos se fueron aunque el archivo quedó huérfano
    assert db_session.get(PhotoDatabaseModel, photo.id) is None
    assert len(object_store.objects) == 1
    assert "No se pudo eliminar el objeto" in caplog.text

def test_delete_photo_swallows_unexpected_store_errors(db_session, object_store, make_user, jpeg_bytes, monkeypatch, caplog):
    owner = make_user()
    service = PhotosService(db_session, object_store)
    photo = service.upload_photo(owner_id=owner.id, data=jpeg_bytes)

    def broken_delete(key):
        raise OSError("disco no disponible")
    monkeypatch.setattr(object_store, "delete", broken_delete)

    assert service.delete_photo(photo.id, owner.id) is True

    assert db_session.get(PhotoDatabaseModel, photo.id) is None
    assert "disco no disponible" in caplog.text

def test_delete_photo_only_by_owner(db_session, object_store, make_user, make_photo):
    owner, stranger = make_user(), make_user()
    photo = make_photo(owner, visibility=Visibility.PUBLIC)

    with pytest.raises(PermissionDeniedError):
        PhotosService(db_session, object_store).delete_photo(photo.id, stranger.id)
    assert db_session.get(PhotoDatabaseModel, photo.id) is not None
