"""
SummaNote - Pydantic Models
Data models and DTOs for API
"""

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# ==================== Core Models ====================


class LineKind(str, Enum):
    """Structural role of one line of model output."""

    SECTION_HEADER = "section_header"
    NUMBERED_ITEM = "numbered_item"
    STAR_HIGHLIGHT = "star_highlight"
    DASH_BULLET = "dash_bullet"
    SUB_BULLET = "sub_bullet"
    BOLD_HEADER = "bold_header"
    QUOTE = "quote"
    PLAIN = "plain"
    BLANK = "blank"


class ClassifiedLine(BaseModel):
    """One input line after classification, with its canonical rewrite."""

    kind: LineKind = Field(..., description="Structural role of the line")
    text: str = Field("", description="Line payload with list/header markers removed")
    canonical: str = Field("", description="Canonical form emitted by the normalizer")
    level: Optional[int] = Field(None, description="Header level (2 or 3)")
    index: Optional[int] = Field(None, description="Number of a numbered item")
    indent: Optional[int] = Field(None, description="Sub-bullet indentation in spaces")
    bold: bool = Field(False, description="Numbered item text was wrapped in bold markers")


class SectionTemplate(BaseModel):
    """Ordered set of required section headers for a document type."""

    name: str = Field(..., description="Template identifier (e.g., notes)")
    sections: List[str] = Field(..., min_length=1, description="Required canonical headers, in order")
    min_sections: int = Field(..., ge=0, description="Minimum number of distinct ## headers")
    required_marker: Optional[str] = Field(
        None, description="Bullet marker the document must contain (e.g., '* ')"
    )
    head_placeholder: str = Field(
        "Key insight from the content", description="Stub bullet for a missing leading section"
    )
    tail_placeholder: str = Field(
        "Important points to remember", description="Stub bullet for a missing trailing section"
    )


class ValidationResult(BaseModel):
    """Structural conformance of a canonical document against a template."""

    is_valid: bool
    present_sections: List[str] = Field(default_factory=list)
    missing_sections: List[str] = Field(default_factory=list)
    score: float = Field(0.0, ge=0, le=100, description="Percent of required headers present")
    word_count: int = 0
    section_count: int = Field(0, description="Distinct ## headers in the document")

    # Diagnostics only; they never affect is_valid
    has_key_takeaways: bool = Field(False, description="Has ## Key Takeaways and a '* ' highlight")
    has_numbered_points: bool = Field(False, description="Has a numbered item with a bold lead")
    has_sub_bullets: bool = Field(False, description="Has an indented sub-bullet")
    has_proper_spacing: bool = Field(False, description="A blank line precedes some ## header")
    has_overview: bool = Field(False, description="Opens with text rather than a header")
    has_bold_formatting: bool = Field(False, description="Contains **bold** markup")


class FormattedDocument(BaseModel):
    """Result of running raw text through normalize/validate/repair."""

    document: str
    validation: ValidationResult
    repaired: bool = Field(False, description="Whether the repair pass ran")


class InlineSpan(BaseModel):
    """A contiguous run of text, bold or not."""

    text: str
    is_bold: bool = False


BlockKind = Literal[
    "header",
    "ordered_item",
    "bullet",
    "sub_bullet",
    "highlight",
    "quote",
    "paragraph",
]

IconCategory = Literal[
    "highlight",
    "check",
    "info",
    "task",
    "closing",
    "document",
    "neutral",
]


class DisplayBlock(BaseModel):
    """Typed display element produced by the block renderer."""

    kind: BlockKind
    spans: List[InlineSpan] = Field(default_factory=list)
    text: Optional[str] = Field(None, description="Header text")
    level: Optional[int] = Field(None, description="Header level (0 for bold-only lines)")
    icon: Optional[IconCategory] = Field(None, description="Header icon category")
    index: Optional[int] = Field(None, description="Ordered item number")
    indent: Optional[int] = Field(None, description="Sub-bullet indent level")


# ==================== Request DTOs ====================


class SummarizeRequest(BaseModel):
    """Request to summarize an article."""

    url: str = Field(..., min_length=1, description="Article URL (http/https)")


class NotesRequest(BaseModel):
    """Request to turn a summary into structured notes."""

    summary: str = Field(..., min_length=1, description="Summary text to convert")


class FormatRequest(BaseModel):
    """Request to normalize and validate text without calling a model."""

    content: str = Field(..., description="Raw markdown-ish text")
    template: str = Field("notes", description="Section template name")


class RenderRequest(BaseModel):
    """Request to render a canonical document into display blocks."""

    content: str = Field(..., description="Canonical document")


# ==================== Response DTOs ====================


class SummaryResponse(BaseModel):
    """Response containing an article summary."""

    summary: str
    url: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    word_count: int
    structure_validation: ValidationResult


class NotesResponse(BaseModel):
    """Response containing structured notes."""

    result: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    word_count: int
    has_proper_formatting: bool
    format_details: ValidationResult


class RenderResponse(BaseModel):
    """Response containing display blocks."""

    blocks: List[DisplayBlock]


class TemplatesResponse(BaseModel):
    """Built-in section templates."""

    templates: List[SectionTemplate]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    env: str
    completion_models: List[str] = Field(default_factory=list)
    models_source: Optional[str] = None
