from __future__ import annotations

import asyncio
import random

import pytest

from scholarhub.errors import AlreadyExistsError
from scholarhub.models.schemas import Bookmark, EntityType, Scholarship, University
from scholarhub.seed import SEED_SCHOLARSHIPS, SEED_UNIVERSITIES
from scholarhub.services.bookmarks import BookmarkManager, resolve_bookmarks
from scholarhub.services.store import InMemoryStore


def _manager() -> BookmarkManager:
    return BookmarkManager(InMemoryStore(Bookmark, "b"))


def test_add_then_list_by_user() -> None:
    manager = _manager()

    bookmark = asyncio.run(manager.add("u1", "s1", EntityType.SCHOLARSHIP))
    listed = asyncio.run(manager.list_by_user("u1"))

    assert listed == [bookmark]
    assert bookmark.entity_id == "s1"
    assert bookmark.entity_type is EntityType.SCHOLARSHIP


def test_second_identical_add_is_rejected() -> None:
    manager = _manager()
    asyncio.run(manager.add("u1", "s1", "scholarship"))

    with pytest.raises(AlreadyExistsError):
        asyncio.run(manager.add("u1", "s1", "scholarship"))

    assert len(asyncio.run(manager.list_by_user("u1"))) == 1


def test_same_entity_id_with_other_type_or_user_is_allowed() -> None:
    manager = _manager()

    asyncio.run(manager.add("u1", "x1", EntityType.SCHOLARSHIP))
    asyncio.run(manager.add("u1", "x1", EntityType.UNIVERSITY))
    asyncio.run(manager.add("u2", "x1", EntityType.SCHOLARSHIP))

    assert len(asyncio.run(manager.list_by_user("u1"))) == 2
    assert len(asyncio.run(manager.list_by_user("u2"))) == 1


def test_remove_known_bookmark() -> None:
    manager = _manager()
    bookmark = asyncio.run(manager.add("u1", "s1", EntityType.SCHOLARSHIP))

    assert asyncio.run(manager.remove(bookmark.id)) is True
    assert asyncio.run(manager.list_by_user("u1")) == []


def test_remove_unknown_id_is_false_and_changes_nothing() -> None:
    manager = _manager()
    kept = asyncio.run(manager.add("u1", "s1", EntityType.SCHOLARSHIP))

    assert asyncio.run(manager.remove("b-unknown")) is False
    assert asyncio.run(manager.list_by_user("u1")) == [kept]


def test_list_by_user_keeps_insertion_order() -> None:
    manager = _manager()
    added = [
        asyncio.run(manager.add("u1", entity_id, EntityType.SCHOLARSHIP))
        for entity_id in ("s3", "s1", "s2")
    ]
    asyncio.run(manager.add("u2", "s1", EntityType.SCHOLARSHIP))

    assert asyncio.run(manager.list_by_user("u1")) == added


def test_toggle_adds_then_removes() -> None:
    manager = _manager()

    bookmarked, bookmark = asyncio.run(manager.toggle("u1", "u3", EntityType.UNIVERSITY))
    assert bookmarked is True
    assert bookmark is not None

    bookmarked, bookmark = asyncio.run(manager.toggle("u1", "u3", EntityType.UNIVERSITY))
    assert bookmarked is False
    assert bookmark is None
    assert asyncio.run(manager.list_by_user("u1")) == []


def test_random_add_remove_sequences_never_duplicate() -> None:
    rng = random.Random(7)
    manager = _manager()
    targets = [(e, t) for e in ("s1", "s2", "u1") for t in EntityType]

    async def run_sequence() -> None:
        for _ in range(200):
            entity_id, entity_type = rng.choice(targets)
            if rng.random() < 0.6:
                try:
                    await manager.add("u1", entity_id, entity_type)
                except AlreadyExistsError:
                    pass
            else:
                current = await manager.list_by_user("u1")
                if current:
                    await manager.remove(rng.choice(current).id)

            keys = [(b.entity_id, b.entity_type) for b in await manager.list_by_user("u1")]
            assert len(keys) == len(set(keys))

    asyncio.run(run_sequence())


def test_concurrent_adds_keep_one_bookmark() -> None:
    manager = _manager()

    async def race() -> list:
        return await asyncio.gather(
            *(manager.add("u1", "s1", EntityType.SCHOLARSHIP) for _ in range(5)),
            return_exceptions=True,
        )

    results = asyncio.run(race())

    assert sum(isinstance(r, Bookmark) for r in results) == 1
    assert sum(isinstance(r, AlreadyExistsError) for r in results) == 4


def test_concurrent_toggles_alternate_without_errors() -> None:
    manager = _manager()

    async def race() -> list:
        return await asyncio.gather(
            *(manager.toggle("u1", "s1", EntityType.SCHOLARSHIP) for _ in range(5)),
            return_exceptions=True,
        )

    results = asyncio.run(race())

    assert not any(isinstance(r, BaseException) for r in results)
    assert [bookmarked for bookmarked, _ in results] == [True, False, True, False, True]
    assert len(asyncio.run(manager.list_by_user("u1"))) == 1


def test_concurrent_toggle_and_add_keep_one_bookmark() -> None:
    manager = _manager()

    async def race() -> list:
        return await asyncio.gather(
            manager.toggle("u1", "s1", EntityType.SCHOLARSHIP),
            manager.add("u1", "s1", EntityType.SCHOLARSHIP),
            return_exceptions=True,
        )

    toggled, added = asyncio.run(race())

    assert toggled[0] is True
    assert isinstance(added, AlreadyExistsError)
    assert len(asyncio.run(manager.list_by_user("u1"))) == 1


def test_resolve_bookmarks_splits_by_type_and_skips_dangling() -> None:
    manager = _manager()
    scholarships = InMemoryStore(Scholarship, "s", SEED_SCHOLARSHIPS)
    universities = InMemoryStore(University, "u", SEED_UNIVERSITIES)

    asyncio.run(manager.add("u1", "s2", EntityType.SCHOLARSHIP))
    asyncio.run(manager.add("u1", "u4", EntityType.UNIVERSITY))
    asyncio.run(manager.add("u1", "s-gone", EntityType.SCHOLARSHIP))
    bookmarks = asyncio.run(manager.list_by_user("u1"))

    view = asyncio.run(resolve_bookmarks(bookmarks, scholarships, universities))

    assert len(view.bookmarks) == 3
    assert [s.id for s in view.scholarships] == ["s2"]
    assert [u.id for u in view.universities] == ["u4"]
