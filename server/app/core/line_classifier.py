"""
SummaNote - Line Classifier
Identify the structural role of each line of model output
"""

import re
from typing import Iterable, List, Optional, Tuple

from .models import ClassifiedLine, LineKind


# Exact (case-insensitive) header synonyms -> canonical header, checked in order
SECTION_SYNONYMS: Tuple[Tuple[str, str], ...] = (
    ("key takeaways", "## Key Takeaways"),
    ("key takeaway", "## Key Takeaways"),
    ("main points", "## Main Points"),
    ("main point", "## Main Points"),
    ("supporting details", "## Supporting Details"),
    ("supporting detail", "## Supporting Details"),
    ("action items", "## Action Items"),
    ("action item", "## Action Items"),
    ("additional notes", "## Additional Notes"),
    ("additional note", "## Additional Notes"),
    ("summary", "## Summary"),
    ("summaries", "## Summary"),
    ("conclusion", "## Summary"),
    ("conclusions", "## Summary"),
)
_SYNONYM_LOOKUP = dict(SECTION_SYNONYMS)

SUB_BULLET_INDENT = 3

HEADER_PATTERN = re.compile(r"^(#{1,3})\s+(.*)$")
NUMBERED_PATTERN = re.compile(r"^(\d+)[.)]\s*(.*)$")
# Rules below run on the raw (untrimmed) line
STAR_PATTERN = re.compile(r"^\*(?!\*)(.)")
DASH_PATTERN = re.compile(r"^[-•]")
SUB_BULLET_PATTERN = re.compile(r"^\s+(?:[-•]|\*(?!\*))")
# Continuation lines must not look like a header, number or bullet
CONTINUATION_EXCLUDE_PATTERN = re.compile(r"^[#\d*-]")
BOLD_LINE_PATTERN = re.compile(r"^\*\*((?:(?!\*\*).)+)\*\*$")
LOWERCASE_START_PATTERN = re.compile(r"^[a-z]")


def _strip_marker(text: str, marker_chars: str) -> str:
    """Remove one leading marker character and the whitespace after it."""
    return re.sub(rf"^[{marker_chars}]\s*", "", text)


def _sub_bullet(text: str) -> ClassifiedLine:
    return ClassifiedLine(
        kind=LineKind.SUB_BULLET,
        text=text,
        canonical=(" " * SUB_BULLET_INDENT + "- " + text).rstrip(),
        indent=SUB_BULLET_INDENT,
    )


def classify_line(line: str, previous_kind: Optional[LineKind] = None) -> ClassifiedLine:
    """
    Classify a single line and compute its canonical form.

    Rules are tried in a fixed priority order; the first match wins:
        1. blank
        2. exact header synonym ("Key Takeaway" -> "## Key Takeaways")
        3. markdown header (#, ## -> ##; ### stays ###)
        4. numbered item ("1." or "1)")
        5. star highlight ("*" not followed by "*")
        6. dash bullet ("-" or "•" with no indentation)
        7. indented sub-bullet (indent normalized to 3 spaces)
        8. continuation of a numbered item (folded in as a sub-bullet)
        9. bold-only line, quote, or plain text

    Args:
        line: Raw input line (no newline)
        previous_kind: Kind of the previously emitted non-blank line. Only
            rule 8 depends on it.

    Returns:
        ClassifiedLine with kind, payload and canonical text

    Raises:
        TypeError: If line is not a string
    """
    if not isinstance(line, str):
        raise TypeError(f"line must be str, got {type(line).__name__}")

    trimmed = line.strip()

    if not trimmed:
        return ClassifiedLine(kind=LineKind.BLANK)

    canonical_header = _SYNONYM_LOOKUP.get(trimmed.lower())
    if canonical_header is not None:
        return ClassifiedLine(
            kind=LineKind.SECTION_HEADER,
            text=canonical_header[3:],
            canonical=canonical_header,
            level=2,
        )

    match = HEADER_PATTERN.match(trimmed)
    if match:
        level = 2 if len(match.group(1)) <= 2 else 3
        header_text = match.group(2).strip()
        return ClassifiedLine(
            kind=LineKind.SECTION_HEADER,
            text=header_text,
            canonical=f"{'#' * level} {header_text}",
            level=level,
        )

    match = NUMBERED_PATTERN.match(trimmed)
    if match:
        number, item_text = match.group(1), match.group(2).strip()
        bold = bool(item_text) and "**" not in item_text and not LOWERCASE_START_PATTERN.match(item_text)
        canonical = f"{number}. **{item_text}**" if bold else f"{number}. {item_text}".rstrip()
        return ClassifiedLine(
            kind=LineKind.NUMBERED_ITEM,
            text=item_text,
            canonical=canonical,
            index=int(number),
            bold=bold,
        )

    if STAR_PATTERN.match(line):
        item_text = trimmed[1:].strip()
        return ClassifiedLine(
            kind=LineKind.STAR_HIGHLIGHT,
            text=item_text,
            canonical=f"* {item_text}".rstrip(),
        )

    if DASH_PATTERN.match(line):
        item_text = _strip_marker(trimmed, "-•")
        return ClassifiedLine(
            kind=LineKind.DASH_BULLET,
            text=item_text,
            canonical=f"- {item_text}".rstrip(),
        )

    if SUB_BULLET_PATTERN.match(line):
        return _sub_bullet(_strip_marker(trimmed, "-•*"))

    if (
        previous_kind == LineKind.NUMBERED_ITEM
        and not CONTINUATION_EXCLUDE_PATTERN.match(trimmed)
        and "##" not in trimmed
    ):
        return _sub_bullet(trimmed)

    match = BOLD_LINE_PATTERN.match(trimmed)
    if match:
        return ClassifiedLine(kind=LineKind.BOLD_HEADER, text=match.group(1), canonical=trimmed)

    if trimmed.startswith(">"):
        return ClassifiedLine(kind=LineKind.QUOTE, text=trimmed[1:].strip(), canonical=trimmed)

    return ClassifiedLine(kind=LineKind.PLAIN, text=trimmed, canonical=trimmed)


def classify_lines(lines: Iterable[str]) -> List[ClassifiedLine]:
    """
    Classify a sequence of lines, skipping blanks.

    The kind of each emitted line is carried forward as ``previous_kind``
    for the next one, so the continuation rule sees rewritten output rather
    than raw input.

    Args:
        lines: Raw input lines

    Returns:
        Classified non-blank lines, in input order
    """
    classified: List[ClassifiedLine] = []
    previous_kind: Optional[LineKind] = None

    for line in lines:
        item = classify_line(line, previous_kind)
        if item.kind == LineKind.BLANK:
            continue
        classified.append(item)
        previous_kind = item.kind

    return classified
