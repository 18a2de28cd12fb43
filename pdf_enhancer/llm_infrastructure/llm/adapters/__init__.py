"""Provider adapters (registered implementations)."""

from .anthropic import AnthropicAdapter
from .gemini import GeminiAdapter
from .openai import OpenAIAdapter

__all__ = ["AnthropicAdapter", "GeminiAdapter", "OpenAIAdapter"]
