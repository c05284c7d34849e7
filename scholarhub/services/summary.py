"""
Summary collaborator: short natural-language synopses from Gemini.

One attempt per call. Any failure surfaces as ExternalServiceError.
"""
import logging
from google.genai import types

from ..config import GEMINI_MODEL, SUMMARY_MAX_LENGTH
from ..errors import ExternalServiceError
from ..models.schemas import Scholarship, University
from ..prompts import (
    DEFAULT_SUMMARY_INSTRUCTION,
    SCHOLARSHIP_CONTEXT,
    SUMMARY_PROMPT,
    UNIVERSITY_CONTEXT,
)

logger = logging.getLogger(__name__)


def _format_budget(budget: float) -> str:
    budget = float(budget)
    if budget.is_integer():
        return str(int(budget))
    return repr(budget)


def scholarship_context(s: Scholarship) -> str:
    return SCHOLARSHIP_CONTEXT.format(
        name=s.name,
        description=s.description,
        country=s.country,
        budget=_format_budget(s.budget),
        major=s.major,
        deadline=s.deadline.isoformat(),
        organization=s.organization,
    )


def university_context(u: University) -> str:
    return UNIVERSITY_CONTEXT.format(
        name=u.name,
        country=u.country,
        programs=", ".join(u.programs),
    )


async def summarize(
    client,
    context: str,
    instruction: str | None = None,
    max_length: int | None = None,
) -> str:
    """Ask Gemini for a synopsis of `context` following `instruction`."""
    instruction = instruction or DEFAULT_SUMMARY_INSTRUCTION
    max_length = max_length or SUMMARY_MAX_LENGTH

    logger.debug("=== SUMMARY REQUEST ===")
    logger.debug(f"Context length: {len(context)} characters")
    logger.debug(f"Instruction: {instruction[:80]}")
    logger.debug(f"Max output tokens: {max_length}")

    if not client:
        logger.error("Gemini client not initialized")
        raise ExternalServiceError("Summary service unavailable: Gemini is not configured")

    prompt = SUMMARY_PROMPT.format(instruction=instruction, context=context)

    try:
        response = await client.aio.models.generate_content(
            model=GEMINI_MODEL,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.7,
                max_output_tokens=max_length,
            )
        )
    except Exception as e:
        logger.error(f"Gemini summary call failed: {type(e).__name__}: {e}")
        raise ExternalServiceError(f"Failed to generate summary: {e}") from e

    text = (response.text or "").strip()
    if not text:
        logger.error("Gemini returned an empty summary")
        raise ExternalServiceError("Failed to generate summary: empty response")

    logger.debug(f"Summary generated, length: {len(text)}")
    return text
