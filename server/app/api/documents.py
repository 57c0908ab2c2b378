"""
SummaNote - Documents API
Format and render documents without calling a model
"""

from fastapi import APIRouter

from ..core.models import (
    FormatRequest,
    FormattedDocument,
    RenderRequest,
    RenderResponse,
    TemplatesResponse,
)
from ..core.pipeline import format_document
from ..core.render import render_document
from ..core.templates import TEMPLATES, get_template

router = APIRouter(prefix="/api", tags=["documents"])


@router.post("/format", response_model=FormattedDocument)
async def format_content(request: FormatRequest) -> FormattedDocument:
    """
    Normalize text and validate it against a named template.

    Runs the same normalize/validate/repair pipeline as the AI endpoints.
    """
    return format_document(request.content, get_template(request.template))


@router.post("/render", response_model=RenderResponse)
async def render_content(request: RenderRequest) -> RenderResponse:
    """Convert a canonical document into display blocks."""
    return RenderResponse(blocks=render_document(request.content))


@router.get("/templates", response_model=TemplatesResponse)
async def list_templates() -> TemplatesResponse:
    """List built-in section templates."""
    return TemplatesResponse(templates=list(TEMPLATES.values()))
