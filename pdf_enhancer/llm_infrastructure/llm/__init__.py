"""Completion providers, model catalog and dispatcher."""

from .base import BaseLLM, LLMResponse, LLMResponseError
from .registry import LLMRegistry, get_llm, register_llm

# Trigger adapter registration side effects
from . import adapters  # noqa: F401

from .catalog import MODEL_CATALOG, ModelSpec, get_model_spec
from .dispatcher import FALLBACK_TEXT, ModelDispatcher

__all__ = [
    "BaseLLM",
    "LLMResponse",
    "LLMResponseError",
    "LLMRegistry",
    "get_llm",
    "register_llm",
    "MODEL_CATALOG",
    "ModelSpec",
    "get_model_spec",
    "FALLBACK_TEXT",
    "ModelDispatcher",
]
