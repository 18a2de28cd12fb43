"""Provider adapter registry.

Adapters register under their provider group ("google", "openai",
"anthropic") and a version tag, so the dispatcher can build one adapter per
configured group without importing vendor modules directly.
"""

from __future__ import annotations

from typing import Any, Type

from .base import BaseLLM


class LLMRegistry:
    """Maps (provider group, version) to an adapter class."""

    _adapters: dict[tuple[str, str], Type[BaseLLM]] = {}

    @classmethod
    def register(cls, group: str, llm_cls: Type[BaseLLM], version: str = "v1") -> None:
        key = (group, version)
        if key in cls._adapters:
            raise ValueError(f"Provider '{group}' version '{version}' already registered")
        cls._adapters[key] = llm_cls

    @classmethod
    def create(cls, group: str, version: str = "v1", **kwargs: Any) -> BaseLLM:
        llm_cls = cls._adapters.get((group, version))
        if llm_cls is None:
            known = ", ".join(f"{g}:{v}" for g, v in sorted(cls._adapters))
            raise ValueError(f"No adapter for provider '{group}' ({version}). Registered: {known}")
        return llm_cls(**kwargs)


def register_llm(group: str, version: str = "v1"):
    """Class decorator registering an adapter for a provider group."""
    def decorator(cls: Type[BaseLLM]) -> Type[BaseLLM]:
        LLMRegistry.register(group, cls, version=version)
        return cls
    return decorator


def get_llm(group: str, version: str = "v1", **kwargs: Any) -> BaseLLM:
    return LLMRegistry.create(group, version=version, **kwargs)


__all__ = ["LLMRegistry", "register_llm", "get_llm"]
