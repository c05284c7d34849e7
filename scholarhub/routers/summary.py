"""
Summary router - /summaries endpoints backed by Gemini.
"""
import logging

from fastapi import APIRouter, Depends

from ..dependencies import AppState, get_gemini_client, get_state
from ..errors import NotFoundError
from ..models.schemas import EntityType, SummaryRequest, SummaryResponse
from ..prompts import SCHOLARSHIP_SUMMARY_INSTRUCTION, UNIVERSITY_SUMMARY_INSTRUCTION
from ..services.summary import scholarship_context, summarize, university_context

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.post("", response_model=SummaryResponse)
async def summarize_text(request: SummaryRequest, client=Depends(get_gemini_client)):
    """Summarize arbitrary text with an optional instruction."""
    summary = await summarize(client, request.context, request.instruction, request.max_length)
    return SummaryResponse(summary=summary)


@router.post("/scholarships/{scholarship_id}", response_model=SummaryResponse)
async def summarize_scholarship(
    scholarship_id: str,
    state: AppState = Depends(get_state),
    client=Depends(get_gemini_client),
):
    """Student-focused synopsis of one scholarship."""
    scholarship = await state.scholarships.find_by_id(scholarship_id)
    if scholarship is None:
        raise NotFoundError(f"Scholarship {scholarship_id} not found")

    logger.info(f"Summarizing scholarship {scholarship_id}")
    summary = await summarize(client, scholarship_context(scholarship), SCHOLARSHIP_SUMMARY_INSTRUCTION)
    return SummaryResponse(summary=summary, entity_id=scholarship_id, entity_type=EntityType.SCHOLARSHIP)


@router.post("/universities/{university_id}", response_model=SummaryResponse)
async def summarize_university(
    university_id: str,
    state: AppState = Depends(get_state),
    client=Depends(get_gemini_client),
):
    university = await state.universities.find_by_id(university_id)
    if university is None:
        raise NotFoundError(f"University {university_id} not found")

    logger.info(f"Summarizing university {university_id}")
    summary = await summarize(client, university_context(university), UNIVERSITY_SUMMARY_INSTRUCTION)
    return SummaryResponse(summary=summary, entity_id=university_id, entity_type=EntityType.UNIVERSITY)
