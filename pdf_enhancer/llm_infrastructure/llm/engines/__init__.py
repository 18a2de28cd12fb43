"""REST engines for the hosted completion providers."""

from .anthropic import AnthropicMessagesClient
from .gemini import GeminiClient
from .openai import OpenAIChatClient

__all__ = ["AnthropicMessagesClient", "GeminiClient", "OpenAIChatClient"]
