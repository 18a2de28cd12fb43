"""Google Gemini generateContent engine."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from pdf_enhancer.config.settings import provider_settings
from ..base import LLMResponse, LLMResponseError, expect_array, expect_object


class GeminiClient:
    """Thin client for /v1beta/models/{model}:generateContent.

    Gemini has no separate system slot here; the system framing is
    prefixed to the user text.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        model: str = "gemini-2.0-flash-exp",
        temperature: Optional[float] = None,
        max_tokens: int = 8192,
        timeout: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or provider_settings.gemini_base_url).rstrip("/")
        self.model = model
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
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": f"{system}\n\n{prompt}"}],
                }
            ],
            "generationConfig": {
                "temperature": temperature if temperature is not None else self.temperature,
                "maxOutputTokens": max_tokens if max_tokens is not None else self.max_tokens,
            },
        }

        resp = self._client.post(
            f"{self.base_url}/v1beta/models/{model or self.model}:generateContent",
            json=payload,
            headers={"x-goog-api-key": self.api_key},
        )
        resp.raise_for_status()
        data = resp.json()
        return LLMResponse(text=_candidate_text(data), raw=data)


def _candidate_text(data: Any) -> str:
    data = expect_object(data, "response")
    candidates = expect_array(data.get("candidates"), "candidates")
    if not candidates:
        feedback = expect_object(data.get("promptFeedback") or {}, "promptFeedback")
        block_reason = feedback.get("blockReason")
        if block_reason:
            raise LLMResponseError(f"prompt blocked ({block_reason})")
        return ""
    candidate = expect_object(candidates[0], "candidates[0]")
    content = expect_object(candidate.get("content") or {}, "candidates[0].content")
    parts = expect_array(content.get("parts"), "candidates[0].content.parts")
    return "".join(
        part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
    )


__all__ = ["GeminiClient"]
