from __future__ import annotations

import asyncio

import pytest

from scholarhub.errors import ExternalServiceError
from scholarhub.models.schemas import Scholarship
from scholarhub.prompts import DEFAULT_SUMMARY_INSTRUCTION
from scholarhub.seed import SEED_SCHOLARSHIPS, SEED_UNIVERSITIES
from scholarhub.services.summary import scholarship_context, summarize, university_context

from .conftest import FakeGemini


def test_summarize_sends_instruction_then_context() -> None:
    gemini = FakeGemini(text="  Concise summary.\n")

    result = asyncio.run(summarize(gemini, "Some context", "Summarize briefly:", max_length=80))

    assert result == "Concise summary."
    call = gemini.models.calls[0]
    assert call["contents"] == "Summarize briefly:\n\nSome context"
    assert call["config"].max_output_tokens == 80
    assert call["config"].temperature == 0.7


def test_summarize_uses_default_instruction() -> None:
    gemini = FakeGemini()

    asyncio.run(summarize(gemini, "Some context"))

    assert gemini.models.calls[0]["contents"].startswith(DEFAULT_SUMMARY_INSTRUCTION)


def test_missing_client_is_an_external_service_error() -> None:
    with pytest.raises(ExternalServiceError):
        asyncio.run(summarize(None, "Some context"))


def test_api_failure_is_not_retried() -> None:
    gemini = FakeGemini(error=RuntimeError("quota exceeded"))

    with pytest.raises(ExternalServiceError, match="quota exceeded"):
        asyncio.run(summarize(gemini, "Some context"))

    assert len(gemini.models.calls) == 1


@pytest.mark.parametrize("text", [None, "", "   "])
def test_empty_response_is_an_error(text) -> None:
    with pytest.raises(ExternalServiceError):
        asyncio.run(summarize(FakeGemini(text=text), "Some context"))


def test_scholarship_context_lists_key_fields() -> None:
    context = scholarship_context(SEED_SCHOLARSHIPS[0])

    assert "Scholarship Name: Global Academic Excellence Scholarship" in context
    assert "Budget: 50000" in context
    assert "Deadline: 2024-12-31" in context
    assert "Organization: Global Scholars Foundation" in context


@pytest.mark.parametrize("budget, shown", [(1234567, "1234567"), (12345.67, "12345.67"), (0, "0")])
def test_scholarship_context_keeps_every_budget_digit(budget, shown) -> None:
    scholarship = Scholarship.model_validate({**SEED_SCHOLARSHIPS[0].model_dump(), "budget": budget})

    assert f"Budget: {shown}\n" in scholarship_context(scholarship)


def test_university_context_joins_programs() -> None:
    context = university_context(SEED_UNIVERSITIES[0])

    assert "University Name: Harvard University" in context
    assert "Programs Offered: Computer Science, Business Administration, Law" in context
