"""
SummaNote - Text Normalization
Coerce raw model output into a canonical document
"""

import re
from typing import List

from .line_classifier import classify_lines
from .models import LineKind


# Reduce excessive blank lines (3+ newlines -> 2)
EXCESS_NEWLINES_PATTERN = re.compile(r"\n{3,}")

# Any run of newlines right before a ## / ### header line
HEADER_SPACING_PATTERN = re.compile(r"\n+(?=#{2,3} )")

# Kinds that get a blank line in front of them
_SPACED_KINDS = (LineKind.SECTION_HEADER, LineKind.BOLD_HEADER)


def canonical_lines(raw: str) -> List[str]:
    """
    Rewrite every non-blank line of raw text into canonical form.

    An empty string is inserted before each header so sections end up
    separated by exactly one blank line after joining.

    Args:
        raw: Raw text (line endings already normalized)

    Returns:
        Canonical lines, including spacing placeholders
    """
    lines: List[str] = []
    for item in classify_lines(raw.split("\n")):
        if item.kind in _SPACED_KINDS:
            lines.append("")
        lines.append(item.canonical)
    return lines


def normalize_document(raw: str) -> str:
    """
    Normalize raw model output into a canonical document.

    Normalizations applied:
        - Convert \\r\\n and \\r to \\n
        - Drop blank lines, rewrite each remaining line (headers, numbered
          items, bullets, sub-bullets) into canonical form
        - Reduce 3+ consecutive newlines to 2
        - Exactly one blank line before every ## / ### header
        - Trim blank lines at both ends (a leading sub-bullet keeps its
          indentation); one trailing newline if non-empty

    normalize_document(normalize_document(x)) == normalize_document(x).

    Args:
        raw: Raw text, possibly empty

    Returns:
        Canonical document ("" for empty input)

    Raises:
        TypeError: If raw is not a string
    """
    if not isinstance(raw, str):
        raise TypeError(f"raw must be str, got {type(raw).__name__}")

    text = raw.replace("\r\n", "\n").replace("\r", "\n")

    document = "\n".join(canonical_lines(text))
    document = EXCESS_NEWLINES_PATTERN.sub("\n\n", document)
    document = HEADER_SPACING_PATTERN.sub("\n\n", document)
    # Canonical lines are already right-stripped
    document = document.strip("\n")

    if document:
        document += "\n"

    return document
