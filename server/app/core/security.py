"""
SummaNote - Input Security Helpers
URL validation and scraped-content cleanup
"""

import re
from urllib.parse import urlparse


SCRIPT_BLOCK_PATTERN = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
TAG_PATTERN = re.compile(r"<[^>]*>")
WHITESPACE_PATTERN = re.compile(r"\s+")
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")


def validate_url(url: str) -> bool:
    """Accept only absolute http(s) URLs with a host."""
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def sanitize_content(content: str) -> str:
    """
    Strip markup from scraped text.

    - Remove <script> blocks
    - Remove remaining tags
    - Collapse whitespace to single spaces
    """
    content = SCRIPT_BLOCK_PATTERN.sub("", content)
    content = TAG_PATTERN.sub("", content)
    content = WHITESPACE_PATTERN.sub(" ", content)
    return content.strip()


def truncate_content(content: str, max_length: int) -> str:
    """
    Limit content length, cutting at sentence boundaries when possible.

    Sentences are re-terminated with "."; if not even the first sentence
    fits, the text is cut hard at ``max_length``.

    Args:
        content: Sanitized text
        max_length: Maximum number of characters

    Returns:
        Truncated text
    """
    if len(content) <= max_length:
        return content

    truncated = ""
    for sentence in SENTENCE_SPLIT_PATTERN.split(content):
        if len(truncated) + len(sentence) + 1 > max_length:
            break
        truncated += sentence + "."

    return truncated or content[:max_length]
