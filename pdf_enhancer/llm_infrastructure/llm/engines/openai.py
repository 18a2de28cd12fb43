"""OpenAI chat completions engine."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from pdf_enhancer.config.settings import provider_settings
from ..base import LLMResponse, expect_array, expect_object


class OpenAIChatClient:
    """Thin client for /v1/chat/completions."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: int = 4096,
        timeout: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or provider_settings.openai_base_url).rstrip("/")
        self.model = model or provider_settings.openai_model
        self.temperature = temperature if temperature is not None else provider_settings.temperature
        self.max_tokens = max_tokens
        self.timeout = timeout if timeout is not None else provider_settings.timeout
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
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": max_tokens if max_tokens is not None else self.max_tokens,
            "temperature": temperature if temperature is not None else self.temperature,
        }

        resp = self._client.post(
            f"{self.base_url}/v1/chat/completions",
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        resp.raise_for_status()
        data = resp.json()
        return LLMResponse(text=_first_choice_text(data), raw=data)


def _first_choice_text(data: Any) -> str:
    choices = expect_array(expect_object(data, "response").get("choices"), "choices")
    if not choices:
        return ""
    choice = expect_object(choices[0], "choices[0]")
    message = expect_object(choice.get("message") or {}, "choices[0].message")
    content = message.get("content")
    return content if isinstance(content, str) else ""


__all__ = ["OpenAIChatClient"]
