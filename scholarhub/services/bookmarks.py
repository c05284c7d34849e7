"""
Bookmark manager: a user's saved scholarships and universities.
"""
import asyncio
import logging

from ..errors import AlreadyExistsError
from ..models.schemas import (
    Bookmark,
    BookmarkCreate,
    DashboardResponse,
    EntityType,
)
from .store import EntityStore

logger = logging.getLogger(__name__)


class BookmarkManager:
    """
    Owns the bookmark collection.

    At most one live bookmark exists per (user, entity, entity type); the
    duplicate check and the insert run under one lock.
    """

    def __init__(self, store: EntityStore[Bookmark]):
        self._store = store
        self._lock = asyncio.Lock()

    async def find(self, user_id: str, entity_id: str, entity_type: EntityType) -> Bookmark | None:
        matches = await self._store.scan(
            lambda b: b.user_id == user_id and b.entity_id == entity_id and b.entity_type == entity_type
        )
        return matches[0] if matches else None

    # _insert and _delete expect self._lock to be held by the caller

    async def _insert(self, user_id: str, entity_id: str, entity_type: EntityType) -> Bookmark:
        if await self.find(user_id, entity_id, entity_type):
            logger.info(f"Duplicate bookmark rejected: user={user_id} {entity_type.value}={entity_id}")
            raise AlreadyExistsError(f"{entity_type.value} {entity_id} is already bookmarked")
        bookmark = await self._store.insert(
            BookmarkCreate(user_id=user_id, entity_id=entity_id, entity_type=entity_type)
        )
        logger.info(f"Bookmark {bookmark.id} added: user={user_id} {entity_type.value}={entity_id}")
        return bookmark

    async def _delete(self, bookmark_id: str) -> bool:
        removed = await self._store.delete(bookmark_id)
        if removed:
            logger.info(f"Bookmark {bookmark_id} removed")
        else:
            logger.debug(f"Bookmark {bookmark_id} not found, nothing removed")
        return removed

    async def add(self, user_id: str, entity_id: str, entity_type: EntityType) -> Bookmark:
        entity_type = EntityType(entity_type)
        async with self._lock:
            return await self._insert(user_id, entity_id, entity_type)

    async def remove(self, bookmark_id: str) -> bool:
        async with self._lock:
            return await self._delete(bookmark_id)

    async def get(self, bookmark_id: str) -> Bookmark | None:
        return await self._store.find_by_id(bookmark_id)

    async def list_by_user(self, user_id: str) -> list[Bookmark]:
        return await self._store.scan(lambda b: b.user_id == user_id)

    async def toggle(self, user_id: str, entity_id: str, entity_type: EntityType) -> tuple[bool, Bookmark | None]:
        """Add the bookmark if missing, otherwise remove it. Returns (bookmarked, bookmark)."""
        entity_type = EntityType(entity_type)
        async with self._lock:
            existing = await self.find(user_id, entity_id, entity_type)
            if existing:
                await self._delete(existing.id)
                return False, None
            return True, await self._insert(user_id, entity_id, entity_type)


async def resolve_bookmarks(
    bookmarks: list[Bookmark],
    scholarships: EntityStore,
    universities: EntityStore,
) -> DashboardResponse:
    """Look up the entities behind each bookmark. Dangling ids are skipped."""
    found_scholarships = []
    found_universities = []

    for bookmark in bookmarks:
        if bookmark.entity_type is EntityType.SCHOLARSHIP:
            entity = await scholarships.find_by_id(bookmark.entity_id)
            target = found_scholarships
        else:
            entity = await universities.find_by_id(bookmark.entity_id)
            target = found_universities

        if entity is None:
            logger.warning(f"Bookmark {bookmark.id} points at missing {bookmark.entity_type.value} {bookmark.entity_id}")
            continue
        target.append(entity)

    return DashboardResponse(
        bookmarks=bookmarks,
        scholarships=found_scholarships,
        universities=found_universities,
    )
