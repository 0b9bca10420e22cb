import pytest

from app.enums import Visibility, FeedSort, LikeTargetType
from app.schemas import LikeTarget
from app.services.feed_service import FeedService
from app.services.likes_service import LikesService

def like_photo(session, users, photo):
    likes = LikesService(session)
    for user in users:
        likes.add_like(user.id, LikeTarget(type=LikeTargetType.PHOTO, id=photo.id))

def test_feed_only_shows_public_photos(db_session, make_user, make_photo, timestamps):
    alice, bob = make_user(), make_user()
    older = make_photo(alice, visibility=Visibility.PUBLIC, created_at=timestamps[0])
    newer = make_photo(bob, visibility=Visibility.PUBLIC, created_at=timestamps[1])
    make_photo(alice, visibility=Visibility.PRIVATE, created_at=timestamps[2])

    page = FeedService(db_session).public_feed()

    assert [p.id for p in page.items] == [newer.id, older.id]
    assert {p.owner_id for p in page.items} == {alice.id, bob.id}
    assert page.next_cursor is None

def test_feed_sorted_by_likes_with_id_tie_break(db_session, make_user, make_photo):
    owner = make_user()
    fans = [make_user() for _ in range(3)]
    popular = make_photo(owner, visibility=Visibility.PUBLIC)
    tied = [make_photo(owner, visibility=Visibility.PUBLIC) for _ in range(2)]
    unloved = make_photo(owner, visibility=Visibility.PUBLIC)
    like_photo(db_session, fans, popular)
    for photo in tied:
        like_photo(db_session, fans[:1], photo)

    page = FeedService(db_session).public_feed(sort=FeedSort.LIKES)

    expected = [popular.id] + sorted(p.id for p in tied) + [unloved.id]
    assert [p.id for p in page.items] == expected
    assert [p.likes_count for p in page.items] == [3, 1, 1, 0]

def test_feed_by_likes_paginates_without_repeats(db_session, make_user, make_photo):
    owner = make_user()
    fans = [make_user() for _ in range(4)]
    photos = [make_photo(owner, visibility=Visibility.PUBLIC) for _ in range(7)]
    # Cuentas con empates: 2, 2, 1, 1, 1, 0, 0
    for photo, n in zip(photos, [2, 2, 1, 1, 1, 0, 0]):
        like_photo(db_session, fans[:n], photo)
    service = FeedService(db_session)

    seen, cursor = [], None
    while True:
        page = service.public_feed(sort=FeedSort.LIKES, limit=2, cursor=cursor)
        seen.extend(page.items)
        if page.next_cursor is None:
            break
        cursor = page.next_cursor

    assert len(seen) == 7
    assert len({p.id for p in seen}) == 7
    assert [p.likes_count for p in seen] == [2, 2, 1, 1, 1, 0, 0]

def test_feed_latest_counts_likes(db_session, make_user, make_photo):
    owner, fan = make_user(), make_user()
    photo = make_photo(owner, visibility=Visibility.PUBLIC)
    like_photo(db_session, [fan], photo)

    (item,) = FeedService(db_session).public_feed(sort=FeedSort.LATEST).items
    assert item.likes_count == 1

@pytest.mark.parametrize("total", [0, 1, 3, 4, 9])
def test_feed_by_likes_walk_visits_each_photo_once(db_session, make_user, make_photo, total):
    owner = make_user()
    fans = [make_user() for _ in range(3)]
    make_photo(owner, visibility=Visibility.PRIVATE)
    photos = [make_photo(owner, visibility=Visibility.PUBLIC) for _ in range(total)]
    counts = {}
    for i, photo in enumerate(photos):
        # Cuentas 0..3 repetidas para que haya empates
        counts[photo.id] = i % 4
        like_photo(db_session, fans[:i % 4], photo)

    expected = sorted(counts, key=lambda photo_id: (-counts[photo_id], photo_id))
    service = FeedService(db_session)

    seen, cursor, pages = [], None, 0
    while True:
        page = service.public_feed(sort=FeedSort.LIKES, limit=3, cursor=cursor)
        pages += 1
        seen.extend(page.items)
        if page.next_cursor is None:
            break
        cursor = page.next_cursor

    assert [p.id for p in seen] == expected
    assert [p.likes_count for p in seen] == [counts[photo_id] for photo_id in expected]
    assert pages == max(1, -(-total // 3))
