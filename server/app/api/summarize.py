"""
SummaNote - Summarize API
Fetch an article and generate a structured summary
"""

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from ..core.config import settings
from ..core.errors import CompletionFailedError, InvalidUrlError
from ..core.logging import get_logger
from ..core.models import SummarizeRequest, SummaryResponse
from ..core.pipeline import format_document
from ..core.prompts import SUMMARY_SYSTEM_PROMPT, build_summary_prompt
from ..core.rate_limit import enforce_rate_limit
from ..core.security import validate_url
from ..core.templates import SUMMARY_TEMPLATE
from ..integrations.article_scraper import scrape_article
from ..integrations.completions import get_completion_provider

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["summarize"])


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_article(payload: SummarizeRequest, request: Request) -> SummaryResponse:
    """
    Summarize the article at a URL.

    - Scrapes the page and extracts its main text
    - Generates a summary with the configured chat model
    - Normalizes the summary and checks it against the summary template
      (one repair pass if the structure is incomplete)
    """
    enforce_rate_limit(
        request,
        scope="summarize",
        max_requests=settings.SUMMARIZE_RATE_LIMIT,
        window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    )

    url = payload.url.strip()
    if not validate_url(url):
        raise InvalidUrlError(url)

    provider = get_completion_provider(settings.SUMMARY_MODEL, settings.SUMMARY_MAX_TOKENS)
    article_content = await scrape_article(url)

    raw_summary = await run_in_threadpool(
        provider.complete, SUMMARY_SYSTEM_PROMPT, build_summary_prompt(article_content)
    )
    if not raw_summary.strip():
        raise CompletionFailedError("Failed to generate summary")

    formatted = format_document(raw_summary, SUMMARY_TEMPLATE)
    logger.info(
        f"Summary for {url}: {formatted.validation.word_count} words, "
        f"score={formatted.validation.score:.0f}, repaired={formatted.repaired}"
    )

    return SummaryResponse(
        summary=formatted.document,
        url=url,
        word_count=formatted.validation.word_count,
        structure_validation=formatted.validation,
    )
