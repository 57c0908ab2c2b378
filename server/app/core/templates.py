"""
SummaNote - Section Templates
Required section layouts for generated documents
"""

from typing import Dict, List

from .errors import UnknownTemplateError
from .models import SectionTemplate


NOTES_TEMPLATE = SectionTemplate(
    name="notes",
    sections=[
        "## Key Takeaways",
        "## Main Points",
        "## Supporting Details",
        "## Action Items",
        "## Summary",
    ],
    min_sections=4,
    required_marker="* ",
    head_placeholder="Key insight from the content",
    tail_placeholder="Important points to remember",
)

SUMMARY_TEMPLATE = SectionTemplate(
    name="summary",
    sections=[
        "## Key Points",
        "## Main Content",
        "## Important Details",
        "## Takeaways",
    ],
    min_sections=3,
    required_marker="- ",
    head_placeholder="Key point from the article",
    tail_placeholder="Main conclusion of the article",
)

TEMPLATES: Dict[str, SectionTemplate] = {
    NOTES_TEMPLATE.name: NOTES_TEMPLATE,
    SUMMARY_TEMPLATE.name: SUMMARY_TEMPLATE,
}


def get_template(name: str) -> SectionTemplate:
    """
    Look up a built-in template by name.

    Raises:
        UnknownTemplateError: If no template has this name
    """
    template = TEMPLATES.get(name)
    if template is None:
        raise UnknownTemplateError(name, list_template_names())
    return template


def list_template_names() -> List[str]:
    return list(TEMPLATES)
