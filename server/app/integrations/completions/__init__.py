"""SummaNote - Completion Providers"""

from .base import CompletionProvider
from .langchain_openai import LangChainOpenAICompletionProvider, get_completion_provider

__all__ = [
	"CompletionProvider",
	"LangChainOpenAICompletionProvider",
	"get_completion_provider",
]
