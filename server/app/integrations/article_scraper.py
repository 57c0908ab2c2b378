"""
SummaNote - Article Scraper
Fetch a web page and extract its main text using httpx + BeautifulSoup
"""

from typing import Optional

import httpx
from bs4 import BeautifulSoup

from ..core.config import settings
from ..core.errors import (
    AccessDeniedError,
    PageNotFoundError,
    ScrapeFailedError,
    ScrapeTimeoutError,
)
from ..core.logging import get_logger
from ..core.security import sanitize_content, truncate_content

logger = get_logger(__name__)


REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
}

# Elements that never hold article text
BOILERPLATE_SELECTORS = (
    "script, style, nav, header, footer, aside, .ad, .advertisement, .social-share, "
    ".comments, .sidebar, .menu, .navigation, .popup, .modal, iframe, noscript"
)

# Tried in order; first one with enough text wins
CONTENT_SELECTORS = (
    "article",
    '[role="main"]',
    ".article-content",
    ".post-content",
    ".entry-content",
    ".content",
    ".article-body",
    ".post-body",
    "main",
    ".main-content",
    "#content",
    "#main",
)
MIN_SELECTOR_CHARS = 300


def extract_article_text(html: str) -> str:
    """
    Extract the main article text from an HTML document.

    Removes boilerplate elements, then returns the text of the first
    content selector with more than 300 characters, falling back to <body>.

    Args:
        html: Raw HTML

    Returns:
        Extracted text (not yet sanitized)
    """
    soup = BeautifulSoup(html, "lxml")

    for element in soup.select(BOILERPLATE_SELECTORS):
        element.decompose()

    for selector in CONTENT_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = element.get_text(" ", strip=True)
        if len(text) > MIN_SELECTOR_CHARS:
            logger.debug(f"Using content selector {selector!r} ({len(text)} chars)")
            return text

    body = soup.body
    return body.get_text(" ", strip=True) if body is not None else ""


def _raise_for_status(url: str, response: httpx.Response) -> None:
    status = response.status_code
    if status < 400:
        return
    if status in (401, 403):
        raise AccessDeniedError(url, status)
    if status == 404:
        raise PageNotFoundError(url)
    raise ScrapeFailedError(url, f"HTTP {status}")


async def scrape_article(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Download a page and return cleaned article text.

    Args:
        url: Validated http(s) URL
        client: Optional shared AsyncClient (a temporary one is created otherwise)

    Returns:
        Sanitized, length-limited article text

    Raises:
        ScrapeTimeoutError: If the site did not answer in time
        AccessDeniedError: On HTTP 401/403
        PageNotFoundError: On HTTP 404
        ScrapeFailedError: On other HTTP/network errors, non-HTML pages,
            or too little text
    """
    timeout = settings.SCRAPER_TIMEOUT_SECONDS
    logger.info(f"Scraping article: {url}")

    try:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as own_client:
                response = await own_client.get(url, headers=REQUEST_HEADERS)
        else:
            response = await client.get(url, headers=REQUEST_HEADERS, timeout=timeout)
    except httpx.TimeoutException as e:
        raise ScrapeTimeoutError(url, timeout) from e
    except httpx.HTTPError as e:
        raise ScrapeFailedError(url, str(e) or type(e).__name__) from e

    _raise_for_status(url, response)

    content_type = response.headers.get("content-type", "")
    if "text/html" not in content_type:
        raise ScrapeFailedError(url, "URL does not point to an HTML page")

    content = sanitize_content(extract_article_text(response.text))
    content = truncate_content(content, settings.SCRAPER_MAX_CHARS)

    if len(content) < settings.SCRAPER_MIN_CHARS:
        raise ScrapeFailedError(url, "Insufficient content extracted from the page")

    logger.info(f"Extracted {len(content)} chars from {url}")
    return content
