"""Anthropic messages engine."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from pdf_enhancer.config.settings import provider_settings
from ..base import LLMResponse, expect_array, expect_object


class AnthropicMessagesClient:
    """Thin client for /v1/messages."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: int = 4096,
        timeout: Optional[int] = None,
        api_version: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or provider_settings.anthropic_base_url).rstrip("/")
        self.model = model or provider_settings.anthropic_model
        self.temperature = temperature if temperature is not None else provider_settings.temperature
        self.max_tokens = max_tokens
        self.timeout = timeout if timeout is not None else provider_settings.timeout
        self.api_version = api_version or provider_settings.anthropic_version
        self._client = client or httpx.Client(timeout=self.timeout)

    def generate(
        self,
        system: str,
        prompt: str,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        payload: dict[str, Any] = {
            "model": model or self.model,
            "system": system,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens if max_tokens is not None else self.max_tokens,
            "temperature": temperature if temperature is not None else self.temperature,
        }

        resp = self._client.post(
            f"{self.base_url}/v1/messages",
            json=payload,
            headers={
                "x-api-key": self.api_key,
                "anthropic-version": self.api_version,
            },
        )
        resp.raise_for_status()
        data = resp.json()
        return LLMResponse(text=_first_text_block(data), raw=data)


def _first_text_block(data: Any) -> str:
    blocks = expect_array(expect_object(data, "response").get("content"), "content")
    for index, block in enumerate(blocks):
        block = expect_object(block, f"content[{index}]")
        if block.get("type") == "text":
            text = block.get("text")
            return text if isinstance(text, str) else ""
    return ""


__all__ = ["AnthropicMessagesClient"]
