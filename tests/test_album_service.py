import pytest
from uuid import uuid4
from sqlalchemy import select, func

from app.enums import Visibility, LikeTargetType
from app.errors import ResourceNotFoundError, PermissionDeniedError
from app.schemas import AlbumCreate, LikeTarget
from app.services.albums_service import AlbumService
from app.services.likes_service import LikesService
from app.services.membership_service import MembershipService
from app.database.models.likes_model import LikeDatabaseModel
from app.database.models.photos_model import PhotoDatabaseModel

def test_create_album_defaults_to_private(db_session, make_user):
    owner = make_user()

    album = AlbumService(db_session).create_album(owner.id, AlbumCreate(title="Navidad"))

    assert album.title == "Navidad"
    assert album.owner_id == owner.id
    assert album.visibility == Visibility.PRIVATE

def test_get_album_respects_visibility(db_session, make_user, make_album):
    owner, stranger = make_user(), make_user()
    private = make_album(owner, visibility=Visibility.PRIVATE)
    public = make_album(owner, visibility=Visibility.PUBLIC)
    service = AlbumService(db_session)

    assert service.get_album(private.id, owner.id).id == private.id
    assert service.get_album(public.id, stranger.id).id == public.id
    with pytest.raises(PermissionDeniedError):
        service.get_album(private.id, stranger.id)
    with pytest.raises(ResourceNotFoundError):
        service.get_album(uuid4(), owner.id)

def test_list_my_albums_newest_first(db_session, make_user, make_album, timestamps):
    owner, other = make_user(), make_user()
    albums = [make_album(owner, title=f"A{i}", created_at=timestamps[i]) for i in range(3)]
    make_album(other)

    page = AlbumService(db_session).list_my_albums(owner.id, limit=2)
    rest = AlbumService(db_session).list_my_albums(owner.id, limit=2, cursor=page.next_cursor)

    assert [a.id for a in page.items + rest.items] == [a.id for a in reversed(albums)]
    assert rest.next_cursor is None

def test_album_with_photos_includes_album_and_page(db_session, make_user, make_photo, make_album):
    owner = make_user()
    album = make_album(owner, visibility=Visibility.PUBLIC, title="Montaña")
    photos = [make_photo(owner) for _ in range(3)]
    memberships = MembershipService(db_session)
    for photo in photos:
        memberships.add(photo.id, album.id, owner.id)

    result = AlbumService(db_session).get_album_with_photos(album.id, owner.id, limit=2)

    assert result.album.title == "Montaña"
    assert len(result.items) == 2
    assert result.next_cursor is not None

def test_delete_album_keeps_photos_and_drops_album_likes(db_session, make_user, make_photo, make_album):
    owner, fan = make_user(), make_user()
    album = make_album(owner, visibility=Visibility.PUBLIC)
    photo = make_photo(owner)
    MembershipService(db_session).add(photo.id, album.id, owner.id)
    LikesService(db_session).add_like(fan.id, LikeTarget(type=LikeTargetType.ALBUM, id=album.id))
    album_id, photo_id = album.id, photo.id
    service = AlbumService(db_session)

    with pytest.raises(PermissionDeniedError):
        service.delete_album(album_id, fan.id)

    assert service.delete_album(album_id, owner.id) is True

    with pytest.raises(ResourceNotFoundError):
        service.get_album(album_id, owner.id)
    assert db_session.get(PhotoDatabaseModel, photo_id) is not None
    assert db_session.execute(
        select(func.count(LikeDatabaseModel.id)).where(LikeDatabaseModel.album_id == album_id)
    ).scalar_one() == 0
