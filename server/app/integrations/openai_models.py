"""SummaNote - OpenAI Model Discovery

At startup:
1. List models via /v1/models
2. Keep the configured summary/notes models that the endpoint serves
3. Register them as available completion models

Discovery failures only log a warning; the configured models are then
registered unverified.
"""

from __future__ import annotations

from typing import List

from openai import OpenAI

from ..core.config import settings
from ..core.logging import get_logger
from ..core.runtime_state import set_completion_models

logger = get_logger(__name__)


def _get_client() -> OpenAI:
    """Create an OpenAI client."""
    return OpenAI(
        base_url=settings.OPENAI_BASE_URL,
        api_key=settings.OPENAI_API_KEY,
    )


def configured_models() -> List[str]:
    """Configured completion models, deduplicated, in settings order."""
    models: List[str] = []
    for model in (settings.SUMMARY_MODEL, settings.NOTES_MODEL):
        if model and model not in models:
            models.append(model)
    return models


def initialize_completion_models() -> None:
    """Detect which configured completion models the endpoint serves and register them."""
    wanted = configured_models()

    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; completion endpoints will return 503")
        set_completion_models([], source="unconfigured")
        return

    try:
        response = _get_client().models.list()
        served = {m.id for m in response.data}
        logger.info(f"Found {len(served)} models from endpoint")
    except Exception as e:
        logger.warning(f"Failed to list models from {settings.OPENAI_BASE_URL}: {e}")
        set_completion_models(wanted, source="configured")
        return

    available = [m for m in wanted if m in served]
    missing = [m for m in wanted if m not in served]
    if missing:
        logger.warning(f"Configured models not served by endpoint: {missing}")

    set_completion_models(available, source="verified")
    logger.info(f"Registered {len(available)} completion models: {available}")
