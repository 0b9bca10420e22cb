import pytest
from uuid import uuid4
from sqlalchemy import select, func

from app.enums import Visibility, AlbumPhotosSort
from app.errors import ConflictError, FourtogenicError, PermissionDeniedError, ResourceNotFoundError
from app.database.models import MembershipDatabaseModel
from app.services.albums_service import AlbumService
from app.services.membership_service import MembershipService

def count_memberships(db_session, album_id):
    stmt = select(func.count(MembershipDatabaseModel.id)).where(MembershipDatabaseModel.album_id == album_id)
    return db_session.execute(stmt).scalar_one()

def test_add_then_duplicate_is_conflict(db_session, make_user, make_photo, make_album):
    owner = make_user()
    photo, album = make_photo(owner), make_album(owner)
    service = MembershipService(db_session)

    membership = service.add(photo.id, album.id, owner.id)
    assert membership.photo_id == photo.id
    assert membership.album_id == album.id

    with pytest.raises(ConflictError):
        service.add(photo.id, album.id, owner.id)
    assert count_memberships(db_session, album.id) == 1

def test_add_requires_owning_both_sides(db_session, make_user, make_photo, make_album):
    alice, bob = make_user(), make_user()
    alice_photo = make_photo(alice, visibility=Visibility.PUBLIC)
    bob_album = make_album(bob, visibility=Visibility.PUBLIC)
    service = MembershipService(db_session)

    # La foto es de Alice y el álbum de Bob: ninguno de los dos puede unirlos
    with pytest.raises(PermissionDeniedError):
        service.add(alice_photo.id, bob_album.id, alice.id)
    with pytest.raises(PermissionDeniedError):
        service.add(alice_photo.id, bob_album.id, bob.id)

def test_add_with_missing_entities_is_not_found(db_session, make_user, make_photo, make_album):
    owner = make_user()
    service = MembershipService(db_session)

    with pytest.raises(ResourceNotFoundError):
        service.add(uuid4(), make_album(owner).id, owner.id)
    with pytest.raises(ResourceNotFoundError):
        service.add(make_photo(owner).id, uuid4(), owner.id)

def test_remove_twice_is_not_found(db_session, make_user, make_photo, make_album):
    owner = make_user()
    photo, album = make_photo(owner), make_album(owner)
    service = MembershipService(db_session)
    service.add(photo.id, album.id, owner.id)

    assert service.remove(photo.id, album.id, owner.id) is True
    with pytest.raises(ResourceNotFoundError):
        service.remove(photo.id, album.id, owner.id)

def test_failed_delete_is_not_reported_as_missing(db_session, make_user, make_photo, make_album, monkeypatch):
    owner = make_user()
    photo, album = make_photo(owner), make_album(owner)
    service = MembershipService(db_session)
    service.add(photo.id, album.id, owner.id)
    # El controlador devuelve False cuando el commit falla y hace rollback
    monkeypatch.setattr(service.membership_controller, "delete_membership", lambda membership: False)

    with pytest.raises(FourtogenicError) as exc_info:
        service.remove(photo.id, album.id, owner.id)

    assert not isinstance(exc_info.value, ResourceNotFoundError)
    assert count_memberships(db_session, album.id) == 1

def test_remove_by_non_owner_is_forbidden(db_session, make_user, make_photo, make_album):
    owner, stranger = make_user(), make_user()
    photo, album = make_photo(owner), make_album(owner)
    service = MembershipService(db_session)
    service.add(photo.id, album.id, owner.id)

    with pytest.raises(PermissionDeniedError):
        service.remove(photo.id, album.id, stranger.id)
    assert count_memberships(db_session, album.id) == 1

def test_non_owner_only_sees_public_photos_of_public_album(db_session, make_user, make_photo, make_album):
    owner, viewer = make_user(), make_user()
    album = make_album(owner, visibility=Visibility.PUBLIC)
    public_photo = make_photo(owner, visibility=Visibility.PUBLIC)
    private_photo = make_photo(owner, visibility=Visibility.PRIVATE)
    service = MembershipService(db_session)
    service.add(public_photo.id, album.id, owner.id)
    service.add(private_photo.id, album.id, owner.id)

    owner_page = service.list_photos_in_album(album, owner.id)
    viewer_page = service.list_photos_in_album(album, viewer.id)
    anonymous_page = service.list_photos_in_album(album, None)

    assert {p.id for p in owner_page.items} == {public_photo.id, private_photo.id}
    assert [p.id for p in viewer_page.items] == [public_photo.id]
    assert [p.id for p in anonymous_page.items] == [public_photo.id]

def test_private_album_listing_is_forbidden_to_others(db_session, make_user, make_photo, make_album):
    owner, viewer = make_user(), make_user()
    album = make_album(owner, visibility=Visibility.PRIVATE)

    with pytest.raises(PermissionDeniedError):
        MembershipService(db_session).list_photos_in_album(album, viewer.id)

def test_album_photos_sorted_by_added_at(db_session, make_user, make_photo, make_album, timestamps):
    owner = make_user()
    album = make_album(owner)
    photos = [make_photo(owner) for _ in range(4)]
    service = MembershipService(db_session)
    for i, photo in enumerate(photos):
        service.add(photo.id, album.id, owner.id)
        # Fechas de inclusión deterministas
        membership = service.membership_controller.get_by_pair(photo.id, album.id)
        membership.added_at = timestamps[i]
        db_session.commit()

    oldest = []
    page = service.list_photos_in_album(album, owner.id, sort=AlbumPhotosSort.OLDEST, limit=3)
    oldest.extend(page.items)
    page = service.list_photos_in_album(album, owner.id, sort=AlbumPhotosSort.OLDEST, limit=3, cursor=page.next_cursor)
    oldest.extend(page.items)
    assert page.next_cursor is None

    recent = service.list_photos_in_album(album, owner.id, sort=AlbumPhotosSort.RECENT, limit=10)

    assert [p.id for p in oldest] == [p.id for p in photos]
    assert [p.id for p in recent.items] == [p.id for p in reversed(photos)]

def test_deleting_album_removes_all_its_memberships(db_session, make_user, make_photo, make_album):
    owner = make_user()
    album = make_album(owner)
    photos = [make_photo(owner) for _ in range(5)]
    membership_service = MembershipService(db_session)
    for photo in photos:
        membership_service.add(photo.id, album.id, owner.id)
    album_id = album.id
    assert count_memberships(db_session, album_id) == 5

    AlbumService(db_session).delete_album(album_id, owner.id)

    assert count_memberships(db_session, album_id) == 0
    # Las fotos siguen existiendo
    assert all(membership_service.photo_controller.get_by_id(p.id) is not None for p in photos)

@pytest.mark.parametrize("sort", [AlbumPhotosSort.RECENT, AlbumPhotosSort.OLDEST])
@pytest.mark.parametrize("total", [0, 1, 3, 4, 9])
def test_album_photos_walk_visits_each_photo_once(db_session, make_user, make_photo, make_album, timestamps, sort, total):
    owner = make_user()
    album = make_album(owner)
    service = MembershipService(db_session)
    memberships = []
    for i in range(total):
        photo = make_photo(owner)
        service.add(photo.id, album.id, owner.id)
        # Fechas repetidas de dos en dos para forzar empates
        membership = service.membership_controller.get_by_pair(photo.id, album.id)
        membership.added_at = timestamps[i // 2]
        db_session.commit()
        memberships.append((membership.added_at, membership.id, photo.id))

    # Orden esperado: fecha en la dirección pedida y, a igualdad, id de membresía asc
    expected = sorted(memberships, key=lambda m: m[1])
    expected.sort(key=lambda m: m[0], reverse=sort == AlbumPhotosSort.RECENT)

    seen, cursor, pages = [], None, 0
    while True:
        page = service.list_photos_in_album(album, owner.id, sort=sort, limit=3, cursor=cursor)
        pages += 1
        seen.extend(page.items)
        if page.next_cursor is None:
            break
        cursor = page.next_cursor

    assert [p.id for p in seen] == [m[2] for m in expected]
    assert pages == max(1, -(-total // 3))
