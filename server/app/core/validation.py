"""
SummaNote - Structure Validation
Check a canonical document against a section template
"""

import re
from typing import Optional

from .models import SectionTemplate, ValidationResult


# Level-2 headers only ("### " and a bare "##" do not count)
SECTION_LINE_PATTERN = re.compile(r"^##[ \t]+.*$", re.MULTILINE)
BOLD_NUMBERED_PATTERN = re.compile(r"^\d+\.[ \t]+\*\*", re.MULTILINE)


def count_sections(document: str) -> int:
    """Count distinct ## header lines in a document."""
    return len({match.group(0).strip() for match in SECTION_LINE_PATTERN.finditer(document)})


def validate_document(
    document: str,
    template: SectionTemplate,
    min_sections: Optional[int] = None,
) -> ValidationResult:
    """
    Inspect a canonical document against a section template.

    A document is valid only when:
        - every template header occurs in it (substring match)
        - it contains the template's required bullet marker, if any
        - it has at least ``min_sections`` distinct ## headers

    The score is the percentage of template headers present. The has_*
    diagnostics are reported for clients and do not affect validity. The
    document is never modified.

    Args:
        document: Canonical document
        template: Required section layout
        min_sections: Override for template.min_sections

    Returns:
        ValidationResult
    """
    present = [section for section in template.sections if section in document]
    missing = [section for section in template.sections if section not in present]

    threshold = template.min_sections if min_sections is None else min_sections
    section_count = count_sections(document)
    has_marker = template.required_marker is None or template.required_marker in document

    is_valid = (
        bool(document.strip())
        and not missing
        and has_marker
        and section_count >= threshold
    )

    return ValidationResult(
        is_valid=is_valid,
        present_sections=present,
        missing_sections=missing,
        score=len(present) / len(template.sections) * 100,
        word_count=len(document.split()),
        section_count=section_count,
        has_key_takeaways="* " in document and "## Key Takeaways" in document,
        has_numbered_points=bool(BOLD_NUMBERED_PATTERN.search(document)),
        has_sub_bullets="   -" in document,
        has_proper_spacing="\n\n##" in document,
        has_overview=bool(document.strip()) and not document.lstrip().startswith("##"),
        has_bold_formatting="**" in document,
    )
