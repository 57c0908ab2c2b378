"""
SummaNote - Block Renderer
Walk a canonical document into typed display blocks
"""

import re
from typing import List, Optional, Tuple

from .inline import parse_inline_spans
from .models import DisplayBlock, IconCategory


# Header keyword -> icon category; first case-insensitive substring match wins
HEADER_ICONS: Tuple[Tuple[str, IconCategory], ...] = (
    ("key takeaways", "highlight"),
    ("main points", "check"),
    ("supporting details", "info"),
    ("action items", "task"),
    ("summary", "closing"),
    ("key points", "check"),
    ("important details", "info"),
    ("takeaways", "task"),
    ("main content", "document"),
)
DEFAULT_ICON: IconCategory = "neutral"

HEADER_PATTERN = re.compile(r"^(#{2,3})\s+(.*)$")
BOLD_LINE_PATTERN = re.compile(r"^\*\*((?:(?!\*\*).)+)\*\*$")
ORDERED_PATTERN = re.compile(r"^(\d+)\.\s+(.*)$")
SUB_BULLET_PATTERN = re.compile(r"^(\s+)(?:[-•]|\*(?!\*))\s*(.*)$")
BULLET_PATTERN = re.compile(r"^[-•]\s+(.*)$")


def header_icon(header_text: str) -> IconCategory:
    """Map header text to an icon category."""
    lowered = header_text.lower()
    for keyword, icon in HEADER_ICONS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON


def render_line(line: str) -> Optional[DisplayBlock]:
    """
    Render one line of a canonical document.

    Returns:
        DisplayBlock, or None for a blank line
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    match = HEADER_PATTERN.match(trimmed)
    if match:
        text = match.group(2).strip()
        return DisplayBlock(
            kind="header",
            level=len(match.group(1)),
            icon=header_icon(text),
            text=text,
            spans=parse_inline_spans(text),
        )

    match = BOLD_LINE_PATTERN.match(trimmed)
    if match:
        text = match.group(1)
        return DisplayBlock(
            kind="header",
            level=0,
            icon=DEFAULT_ICON,
            text=text,
            spans=parse_inline_spans(trimmed),
        )

    match = ORDERED_PATTERN.match(trimmed)
    if match:
        return DisplayBlock(
            kind="ordered_item",
            index=int(match.group(1)),
            spans=parse_inline_spans(match.group(2)),
        )

    match = SUB_BULLET_PATTERN.match(line.rstrip())
    if match:
        return DisplayBlock(
            kind="sub_bullet",
            indent=max(1, len(match.group(1)) // 2),
            spans=parse_inline_spans(match.group(2)),
        )

    match = BULLET_PATTERN.match(trimmed)
    if match:
        return DisplayBlock(kind="bullet", spans=parse_inline_spans(match.group(1)))

    if trimmed.startswith("*") and not trimmed.startswith("**"):
        return DisplayBlock(kind="highlight", spans=parse_inline_spans(trimmed[1:].strip()))

    if trimmed.startswith(">"):
        return DisplayBlock(kind="quote", spans=parse_inline_spans(trimmed[1:].strip()))

    return DisplayBlock(kind="paragraph", spans=parse_inline_spans(trimmed))


def render_document(document: str) -> List[DisplayBlock]:
    """
    Convert a canonical document into an ordered list of display blocks.

    Blank lines are skipped. A new list is built on every call.

    Args:
        document: Canonical document

    Returns:
        Display blocks in document order

    Raises:
        TypeError: If document is not a string
    """
    if not isinstance(document, str):
        raise TypeError(f"document must be str, got {type(document).__name__}")

    blocks: List[DisplayBlock] = []
    for line in document.split("\n"):
        block = render_line(line)
        if block is not None:
            blocks.append(block)
    return blocks
