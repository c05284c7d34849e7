"""
Bookmarks router - /bookmarks, /bookmarks/toggle and /dashboard endpoints.
"""
import logging

from fastapi import APIRouter, Depends

from ..dependencies import AppState, current_user, get_state
from ..errors import NotFoundError
from ..models.schemas import (
    Bookmark,
    BookmarkRemoveResponse,
    BookmarkRequest,
    BookmarkToggleResponse,
    DashboardResponse,
    EntityType,
    User,
)
from ..services.bookmarks import resolve_bookmarks

logger = logging.getLogger(__name__)
router = APIRouter(tags=["bookmarks"])


async def _require_entity(state: AppState, entity_id: str, entity_type: EntityType) -> None:
    store = state.scholarships if entity_type is EntityType.SCHOLARSHIP else state.universities
    if await store.find_by_id(entity_id) is None:
        raise NotFoundError(f"{entity_type.value.capitalize()} {entity_id} not found")


@router.get("/bookmarks", response_model=list[Bookmark])
async def list_bookmarks(user: User = Depends(current_user), state: AppState = Depends(get_state)):
    return await state.bookmarks.list_by_user(user.id)


@router.post("/bookmarks", response_model=Bookmark, status_code=201)
async def add_bookmark(
    request: BookmarkRequest,
    user: User = Depends(current_user),
    state: AppState = Depends(get_state),
):
    """Bookmark an entity for the current user. A second bookmark for it is a conflict."""
    await _require_entity(state, request.entity_id, request.entity_type)
    return await state.bookmarks.add(user.id, request.entity_id, request.entity_type)


@router.post("/bookmarks/toggle", response_model=BookmarkToggleResponse)
async def toggle_bookmark(
    request: BookmarkRequest,
    user: User = Depends(current_user),
    state: AppState = Depends(get_state),
):
    await _require_entity(state, request.entity_id, request.entity_type)
    bookmarked, bookmark = await state.bookmarks.toggle(user.id, request.entity_id, request.entity_type)
    return BookmarkToggleResponse(bookmarked=bookmarked, bookmark=bookmark)


@router.delete("/bookmarks/{bookmark_id}", response_model=BookmarkRemoveResponse)
async def remove_bookmark(
    bookmark_id: str,
    user: User = Depends(current_user),
    state: AppState = Depends(get_state),
):
    """Remove one of the caller's bookmarks. Unknown or foreign ids report removed=false."""
    bookmark = await state.bookmarks.get(bookmark_id)
    if bookmark is None or bookmark.user_id != user.id:
        logger.debug(f"Bookmark {bookmark_id} not removable by {user.id}")
        return BookmarkRemoveResponse(removed=False)
    return BookmarkRemoveResponse(removed=await state.bookmarks.remove(bookmark_id))


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(user: User = Depends(current_user), state: AppState = Depends(get_state)):
    """The caller's bookmarks resolved into scholarships and universities."""
    bookmarks = await state.bookmarks.list_by_user(user.id)
    logger.debug(f"Dashboard for {user.id}: {len(bookmarks)} bookmarks")
    return await resolve_bookmarks(bookmarks, state.scholarships, state.universities)
