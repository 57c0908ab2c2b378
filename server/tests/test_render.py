"""
Tests for inline span tokenizing and block rendering
"""

import pytest

from app.core.inline import parse_inline_spans
from app.core.render import header_icon, render_document


def _spans(spans):
    return [(s.text, s.is_bold) for s in spans]


class TestParseInlineSpans:
    """Tests for parse_inline_spans."""

    def test_plain_text(self):
        assert _spans(parse_inline_spans("no markup")) == [("no markup", False)]

    def test_empty_text(self):
        assert parse_inline_spans("") == []

    def test_leading_bold(self):
        assert _spans(parse_inline_spans("**bold** rest")) == [("bold", True), (" rest", False)]

    def test_multiple_pairs(self):
        assert _spans(parse_inline_spans("a **b** c **d**")) == [
            ("a ", False),
            ("b", True),
            (" c ", False),
            ("d", True),
        ]

    def test_unmatched_delimiter_is_literal(self):
        assert _spans(parse_inline_spans("a ** b")) == [("a ** b", False)]

    def test_trailing_unmatched_after_pair(self):
        assert _spans(parse_inline_spans("**x** and ** y")) == [("x", True), (" and ** y", False)]

    def test_empty_pair_dropped(self):
        assert _spans(parse_inline_spans("a****b")) == [("ab", False)]


class TestHeaderIcon:
    """Header keyword table."""

    @pytest.mark.parametrize(
        "text,icon",
        [
            ("Key Takeaways", "highlight"),
            ("ACTION ITEMS for next week", "task"),
            ("Summary", "closing"),
            ("Takeaways", "task"),
            ("Main Content", "document"),
            ("Something Else", "neutral"),
        ],
    )
    def test_icons(self, text, icon):
        assert header_icon(text) == icon


class TestRenderDocument:
    """Tests for render_document."""

    def test_highlight_with_bold(self):
        blocks = render_document("* **bold** rest\n")
        assert len(blocks) == 1
        assert blocks[0].kind == "highlight"
        assert _spans(blocks[0].spans) == [("bold", True), (" rest", False)]

    def test_empty_document(self):
        assert render_document("") == []

    def test_block_kinds_in_order(self):
        doc = (
            "Overview with **terms**.\n"
            "\n"
            "## Key Takeaways\n"
            "* insight\n"
            "\n"
            "### Detail\n"
            "1. **Alpha**\n"
            "   - sub point\n"
            "- bullet\n"
            "> quoted\n"
            "**Bold Header**\n"
        )
        blocks = render_document(doc)
        assert [b.kind for b in blocks] == [
            "paragraph",
            "header",
            "highlight",
            "header",
            "ordered_item",
            "sub_bullet",
            "bullet",
            "quote",
            "header",
        ]

        assert blocks[1].level == 2
        assert blocks[1].icon == "highlight"
        assert blocks[1].text == "Key Takeaways"
        assert blocks[3].level == 3
        assert blocks[3].icon == "neutral"
        assert blocks[4].index == 1
        assert _spans(blocks[4].spans) == [("Alpha", True)]
        assert blocks[5].indent == 1
        assert _spans(blocks[5].spans) == [("sub point", False)]
        assert _spans(blocks[7].spans) == [("quoted", False)]
        assert blocks[8].level == 0
        assert blocks[8].text == "Bold Header"

    def test_fresh_blocks_each_call(self):
        doc = "- a\n"
        first = render_document(doc)
        second = render_document(doc)
        assert first == second
        assert first[0] is not second[0]

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            render_document(None)
