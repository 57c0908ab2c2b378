"""SummaNote - Runtime State

Runtime state that changes after startup: completion models confirmed
against the configured endpoint.
"""

from __future__ import annotations

from threading import Lock
from typing import List, Optional


_completion_models: List[str] = []
_models_source: Optional[str] = None
_lock = Lock()


def set_completion_models(models: List[str], source: str) -> None:
    """Record the completion models available to the service."""
    global _completion_models, _models_source
    with _lock:
        _completion_models = list(models)
        _models_source = source


def get_completion_models() -> List[str]:
    """Get the registered completion models."""
    with _lock:
        return list(_completion_models)


def get_models_source() -> Optional[str]:
    """Where the registered models came from ("verified", "configured"), or None before startup."""
    with _lock:
        return _models_source
