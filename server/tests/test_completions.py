"""
Tests for the LangChain completion provider
"""

import httpx
import openai
import pytest
from langchain_core.messages import AIMessage

from app.core.config import settings
from app.core.errors import CompletionFailedError, ServiceUnavailableError
from app.integrations.completions import get_completion_provider


class _StubChat:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.messages = None

    def invoke(self, messages):
        self.messages = messages
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")


class TestCompletionProvider:
    """Model and token limit are fixed at construction; errors are mapped."""

    def test_max_tokens_set_at_construction(self, api_key):
        provider = get_completion_provider("gpt-4o-mini", 321)

        assert provider._chat.max_tokens == 321
        assert provider.name() == "langchain_openai:gpt-4o-mini"

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "")

        with pytest.raises(ServiceUnavailableError):
            get_completion_provider("gpt-4o-mini", 100)

    def test_complete_strips_reply(self, api_key):
        provider = get_completion_provider("gpt-4o-mini", 100)
        provider._chat = _StubChat(reply="  ## Summary\n* done  \n")

        assert provider.complete("system", "user") == "## Summary\n* done"
        assert [m.content for m in provider._chat.messages] == ["system", "user"]

    def test_rate_limit_mapped(self, api_key):
        response = httpx.Response(429, request=httpx.Request("POST", "https://api.openai.com/v1/chat"))
        provider = get_completion_provider("gpt-4o-mini", 100)
        provider._chat = _StubChat(error=openai.RateLimitError("busy", response=response, body=None))

        with pytest.raises(CompletionFailedError) as exc_info:
            provider.complete("system", "user")

        assert exc_info.value.status_code == 429
        assert exc_info.value.code == "RATE_LIMITED"
