"""
SummaNote - Notes API
Turn a summary into structured notes
"""

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from ..core.config import settings
from ..core.errors import CompletionFailedError, ContentTooLongError, ContentTooShortError
from ..core.logging import get_logger
from ..core.models import NotesRequest, NotesResponse
from ..core.pipeline import format_document
from ..core.prompts import NOTES_SYSTEM_PROMPT, build_notes_prompt
from ..core.rate_limit import enforce_rate_limit
from ..core.templates import NOTES_TEMPLATE
from ..integrations.completions import get_completion_provider

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["notes"])


@router.post("/notes", response_model=NotesResponse)
async def generate_notes(payload: NotesRequest, request: Request) -> NotesResponse:
    """
    Generate structured notes from a summary.

    The generated notes are normalized and checked against the notes
    template; a failed check triggers one repair pass. The final
    validation is returned alongside the notes.
    """
    enforce_rate_limit(
        request,
        scope="notes",
        max_requests=settings.NOTES_RATE_LIMIT,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )

    summary = payload.summary.strip()
    if len(summary) < settings.NOTES_MIN_INPUT_CHARS:
        raise ContentTooShortError(len(summary), settings.NOTES_MIN_INPUT_CHARS, what="Summary")
    if len(summary) > settings.NOTES_MAX_INPUT_CHARS:
        raise ContentTooLongError(len(summary), settings.NOTES_MAX_INPUT_CHARS, what="Summary")

    provider = get_completion_provider(settings.NOTES_MODEL, settings.NOTES_MAX_TOKENS)
    raw_notes = await run_in_threadpool(
        provider.complete, NOTES_SYSTEM_PROMPT, build_notes_prompt(summary)
    )
    raw_notes = raw_notes.strip()

    if not raw_notes:
        raise CompletionFailedError("Failed to generate notes")
    if len(raw_notes) < settings.NOTES_MIN_OUTPUT_CHARS:
        raise ContentTooShortError(
            len(raw_notes), settings.NOTES_MIN_OUTPUT_CHARS, what="Generated content"
        )

    formatted = format_document(raw_notes, NOTES_TEMPLATE)
    logger.info(
        f"Notes generated: {formatted.validation.word_count} words, "
        f"valid={formatted.validation.is_valid}, repaired={formatted.repaired}"
    )

    return NotesResponse(
        result=formatted.document,
        word_count=formatted.validation.word_count,
        has_proper_formatting=formatted.validation.is_valid,
        format_details=formatted.validation,
    )
