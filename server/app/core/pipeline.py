"""
SummaNote - Formatting Pipeline
normalize -> validate -> (repair -> validate) for one generated document
"""

from .logging import get_logger
from .models import FormattedDocument, SectionTemplate
from .normalize import normalize_document
from .repair import repair_document
from .validation import validate_document

logger = get_logger(__name__)


def format_document(raw: str, template: SectionTemplate) -> FormattedDocument:
    """
    Turn raw model output into a canonical document checked against a template.

    The repair pass runs at most once. A document that is still invalid
    afterwards is returned as-is with ``validation.is_valid`` False.
    Empty input is never repaired.

    Args:
        raw: Raw model output
        template: Required section layout

    Returns:
        FormattedDocument with the final document and its validation
    """
    document = normalize_document(raw)
    validation = validate_document(document, template)

    if validation.is_valid or not document:
        return FormattedDocument(document=document, validation=validation)

    logger.warning(
        f"{template.name} format validation failed "
        f"(score={validation.score:.0f}, missing={validation.missing_sections}), attempting repair"
    )
    document = repair_document(document, template)
    validation = validate_document(document, template)

    if not validation.is_valid:
        logger.warning(
            f"{template.name} still invalid after repair: missing={validation.missing_sections}"
        )

    return FormattedDocument(document=document, validation=validation, repaired=True)
