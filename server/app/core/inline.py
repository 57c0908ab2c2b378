"""
SummaNote - Inline Spans
Split a line into bold / non-bold runs
"""

from typing import List

from .models import InlineSpan


BOLD_DELIMITER = "**"


def _append_span(spans: List[InlineSpan], text: str, is_bold: bool) -> None:
    """Append a span, merging with the previous one when boldness matches."""
    if not text:
        return
    if spans and spans[-1].is_bold == is_bold:
        spans[-1] = InlineSpan(text=spans[-1].text + text, is_bold=is_bold)
        return
    spans.append(InlineSpan(text=text, is_bold=is_bold))


def parse_inline_spans(text: str) -> List[InlineSpan]:
    """
    Tokenize ``**bold**`` markup into inline spans.

    Delimiters are paired left to right; each pair closes at the nearest
    following ``**``. An unmatched ``**`` is kept as literal text.
    Empty spans are dropped.

    Examples:
        "**bold** rest" -> [("bold", True), (" rest", False)]
        "a ** b"        -> [("a ** b", False)]

    Args:
        text: Line payload

    Returns:
        Ordered list of InlineSpan
    """
    spans: List[InlineSpan] = []
    pos = 0
    width = len(BOLD_DELIMITER)

    while pos < len(text):
        open_at = text.find(BOLD_DELIMITER, pos)
        if open_at == -1:
            break
        close_at = text.find(BOLD_DELIMITER, open_at + width)
        if close_at == -1:
            break

        _append_span(spans, text[pos:open_at], False)
        _append_span(spans, text[open_at + width:close_at], True)
        pos = close_at + width

    _append_span(spans, text[pos:], False)
    return spans
