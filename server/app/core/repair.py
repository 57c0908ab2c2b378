"""
SummaNote - Repair Pass
Insert stub sections for a missing leading or trailing header
"""

from .models import SectionTemplate
from .normalize import normalize_document


def _stub(header: str, marker: str, placeholder: str) -> str:
    return f"{header}\n{marker}{placeholder}"


def repair_document(document: str, template: SectionTemplate) -> str:
    """
    Add stub sections for missing anchor headers, then re-normalize.

    Only the first and last template headers are synthesized: a missing
    leading section is prepended, a missing trailing section is appended.
    Headers missing from the middle of the template are left missing, so
    the result can still fail validation.

    Callers run this at most once, and only after validation failed.

    Args:
        document: Canonical document that failed validation
        template: Required section layout

    Returns:
        Re-normalized canonical document
    """
    marker = template.required_marker or "- "
    leading, trailing = template.sections[0], template.sections[-1]

    repaired = document
    if leading not in repaired:
        repaired = _stub(leading, marker, template.head_placeholder) + "\n\n" + repaired
    if trailing not in repaired:
        repaired = repaired + "\n\n" + _stub(trailing, marker, template.tail_placeholder)

    return normalize_document(repaired)
