"""
Shared fixtures for API tests
"""

import pytest
from fastapi.testclient import TestClient

from app.core.rate_limit import reset_rate_limits
from app.integrations.completions import CompletionProvider
from app.main import app


class FakeCompletionProvider(CompletionProvider):
    """Returns canned output and records the prompts it was given."""

    def __init__(self, output: str):
        self.output = output
        self.calls = []

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        return self.output

    def name(self) -> str:
        return "fake"


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_provider(monkeypatch):
    """Install a fake completion provider for both AI endpoints."""

    provider = FakeCompletionProvider("")

    def factory(model, max_tokens):
        return provider

    monkeypatch.setattr("app.api.notes.get_completion_provider", factory)
    monkeypatch.setattr("app.api.summarize.get_completion_provider", factory)
    return provider
