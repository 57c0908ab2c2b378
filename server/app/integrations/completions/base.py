"""
SummaNote - Completion Provider Base
Abstract base class for chat completion providers
"""

from abc import ABC, abstractmethod


class CompletionProvider(ABC):
    """Abstract base class for completion providers."""

    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Generate raw text for a system/user prompt pair.

        Args:
            system_prompt: Instructions for the model
            user_prompt: Content to work on

        Returns:
            Raw model output (may be empty)
        """
        pass

    @abstractmethod
    def name(self) -> str:
        """
        Get the name/identifier of this provider.

        Returns:
            Provider name
        """
        pass
