"""Base classes and response model for completion providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class LLMResponse:
    """Normalized completion response.

    ``text`` is empty when the provider answered successfully but produced
    no usable text.
    """

    text: str
    raw: dict[str, Any] | None = None


class BaseLLM(ABC):
    """Common interface for all completion providers."""

    # Human-readable provider label used in messages
    provider_name: str = "LLM"

    def __init__(self, **kwargs: Any) -> None:
        self.config = kwargs

    @abstractmethod
    def complete(
        self,
        system: str,
        prompt: str,
        *,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Run one blocking completion round-trip."""
        raise NotImplementedError

    def __repr__(self) -> str:
        config = {k: v for k, v in self.config.items() if k != "api_key"}
        return f"{self.__class__.__name__}(config={config})"


class LLMResponseError(Exception):
    """Raised when a provider answers but the answer cannot be used."""

    pass


def expect_object(value: Any, where: str) -> dict[str, Any]:
    """Return ``value`` when it is a JSON object; otherwise the response is unusable."""
    if not isinstance(value, dict):
        raise LLMResponseError(f"expected an object at {where}, got {type(value).__name__}")
    return value


def expect_array(value: Any, where: str) -> list[Any]:
    """Return ``value`` when it is a JSON array; null counts as empty."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise LLMResponseError(f"expected an array at {where}, got {type(value).__name__}")
    return value


__all__ = ["BaseLLM", "LLMResponse", "LLMResponseError", "expect_array", "expect_object"]
