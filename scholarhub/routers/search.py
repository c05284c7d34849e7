"""
Search router - /scholarships and /universities listing and lookup endpoints.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from ..dependencies import AppState, get_session, get_state
from ..errors import NotFoundError
from ..models.schemas import (
    EntityType,
    Scholarship,
    ScholarshipResult,
    SearchFilters,
    University,
    UniversityResult,
)
from ..services.auth import Session
from ..services.search import search

logger = logging.getLogger(__name__)
router = APIRouter(tags=["search"])


async def _bookmark_ids(state: AppState, session: Session, entity_type: EntityType) -> dict[str, str]:
    """entity id -> bookmark id for the session's user."""
    if not session.is_authenticated:
        return {}
    bookmarks = await state.bookmarks.list_by_user(session.user.id)
    return {b.entity_id: b.id for b in bookmarks if b.entity_type is entity_type}


@router.get("/scholarships", response_model=list[ScholarshipResult])
async def list_scholarships(
    filters: Annotated[SearchFilters, Query()],
    state: AppState = Depends(get_state),
    session: Session = Depends(get_session),
):
    """Scholarships matching the filters, each with the caller's bookmark id."""
    logger.debug(f"Scholarship search: {filters.model_dump(exclude_defaults=True)}")

    results = search(await state.scholarships.scan(), filters, EntityType.SCHOLARSHIP)
    bookmarked = await _bookmark_ids(state, session, EntityType.SCHOLARSHIP)

    logger.info(f"Scholarship search returned {len(results)} results")
    return [
        ScholarshipResult(**s.model_dump(), bookmark_id=bookmarked.get(s.id))
        for s in results
    ]


@router.get("/universities", response_model=list[UniversityResult])
async def list_universities(
    filters: Annotated[SearchFilters, Query()],
    state: AppState = Depends(get_state),
    session: Session = Depends(get_session),
):
    """Universities matching query, country and major. Budget and deadline are ignored."""
    logger.debug(f"University search: {filters.model_dump(exclude_defaults=True)}")

    results = search(await state.universities.scan(), filters, EntityType.UNIVERSITY)
    bookmarked = await _bookmark_ids(state, session, EntityType.UNIVERSITY)

    logger.info(f"University search returned {len(results)} results")
    return [
        UniversityResult(**u.model_dump(), bookmark_id=bookmarked.get(u.id))
        for u in results
    ]


@router.get("/scholarships/{scholarship_id}", response_model=Scholarship)
async def get_scholarship(scholarship_id: str, state: AppState = Depends(get_state)):
    scholarship = await state.scholarships.find_by_id(scholarship_id)
    if scholarship is None:
        raise NotFoundError(f"Scholarship {scholarship_id} not found")
    return scholarship


@router.get("/universities/{university_id}", response_model=University)
async def get_university(university_id: str, state: AppState = Depends(get_state)):
    university = await state.universities.find_by_id(university_id)
    if university is None:
        raise NotFoundError(f"University {university_id} not found")
    return university
