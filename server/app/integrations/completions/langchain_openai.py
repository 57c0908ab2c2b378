"""SummaNote - LangChain OpenAI Completion Provider

Chat completions through LangChain ChatOpenAI.
Works against any OpenAI-compatible endpoint (OPENAI_BASE_URL).
"""

from __future__ import annotations

import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from ...core.config import settings
from ...core.errors import CompletionFailedError, ErrorCodes, ServiceUnavailableError
from ...core.logging import get_logger
from .base import CompletionProvider

logger = get_logger(__name__)


def _is_content_filtered(exc: Exception) -> bool:
    message = str(exc).lower()
    return "content filter" in message or "content_filter" in message or "safety" in message


class LangChainOpenAICompletionProvider(CompletionProvider):
    """Completion provider backed by LangChain ChatOpenAI."""

    def __init__(self, model: str, max_tokens: int):
        if not settings.OPENAI_API_KEY:
            raise ServiceUnavailableError()

        self._model = model
        logger.info(f"Creating LangChain chat provider for model: {model}")
        self._chat = ChatOpenAI(
            model=model,
            openai_api_key=settings.OPENAI_API_KEY,
            openai_api_base=settings.OPENAI_BASE_URL,
            temperature=settings.COMPLETION_TEMPERATURE,
            max_tokens=max_tokens,
            top_p=0.9,
            presence_penalty=0.1,
            frequency_penalty=0.2,
        )

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
        try:
            response = self._chat.invoke(messages)
        except openai.RateLimitError as e:
            raise CompletionFailedError(
                "AI service is currently busy. Please try again in a moment.",
                status_code=429,
                code=ErrorCodes.RATE_LIMITED,
            ) from e
        except openai.BadRequestError as e:
            if _is_content_filtered(e):
                raise CompletionFailedError(
                    "Content cannot be processed due to safety guidelines.",
                    status_code=400,
                    code=ErrorCodes.CONTENT_FILTERED,
                ) from e
            raise CompletionFailedError(f"Completion request rejected: {e}") from e
        except openai.OpenAIError as e:
            raise CompletionFailedError(f"Completion failed: {e}") from e

        content = response.content if isinstance(response.content, str) else ""
        logger.debug(f"{self.name()} returned {len(content)} chars")
        return content.strip()

    def name(self) -> str:
        return f"langchain_openai:{self._model}"


def get_completion_provider(model: str, max_tokens: int) -> CompletionProvider:
    """Create a completion provider for the given model."""
    return LangChainOpenAICompletionProvider(model, max_tokens)
