"""OpenAI chat completions adapter registered in the LLM registry."""

from __future__ import annotations

from typing import Any

from ..base import BaseLLM, LLMResponse
from ..engines.openai import OpenAIChatClient
from ..registry import register_llm


@register_llm("openai", version="v1")
class OpenAIAdapter(BaseLLM):
    provider_name = "OpenAI"

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        timeout: int | None = None,
        client: Any | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url=base_url, model=model, **kwargs)
        engine_kwargs: dict[str, Any] = {
            "api_key": api_key,
            "base_url": base_url,
            "temperature": temperature,
            "timeout": timeout,
            "client": client,
        }
        if model is not None:
            engine_kwargs["model"] = model
        if max_tokens is not None:
            engine_kwargs["max_tokens"] = max_tokens
        self.engine = OpenAIChatClient(**engine_kwargs)

    def complete(
        self,
        system: str,
        prompt: str,
        *,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        return self.engine.generate(
            system,
            prompt,
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
        )


__all__ = ["OpenAIAdapter"]
