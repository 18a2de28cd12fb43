"""Catalog of selectable models and the provider group serving each."""

from __future__ import annotations

from dataclasses import dataclass

from pdf_enhancer.domain.schemas import ModelId

# Provider groups, matching the names adapters register under
GOOGLE = "google"
OPENAI = "openai"
ANTHROPIC = "anthropic"

PROVIDER_GROUPS = (GOOGLE, OPENAI, ANTHROPIC)


@dataclass(frozen=True)
class ModelSpec:
    """Static description of one selectable model."""

    id: ModelId
    name: str
    group: str
    provider_label: str
    max_tokens: int
    # None means "use the adapter's configured default model"
    variant: str | None = None
    is_default: bool = False
    description: str = ""


MODEL_CATALOG: dict[ModelId, ModelSpec] = {
    spec.id: spec
    for spec in (
        ModelSpec(
            id=ModelId.GEMINI_2_0_FLASH_EXP,
            name="Gemini 2.0 Flash (Experimental)",
            group=GOOGLE,
            provider_label="Google",
            max_tokens=8192,
            variant="gemini-2.0-flash-exp",
            is_default=True,
            description="Latest experimental Gemini model with enhanced capabilities",
        ),
        ModelSpec(
            id=ModelId.GEMINI_1_5_FLASH_LATEST,
            name="Gemini 1.5 Flash (Latest)",
            group=GOOGLE,
            provider_label="Google",
            max_tokens=8192,
            variant="gemini-1.5-flash-latest",
            description="Latest Gemini 1.5 Flash with most recent updates",
        ),
        ModelSpec(
            id=ModelId.GEMINI_1_5_FLASH,
            name="Gemini 1.5 Flash",
            group=GOOGLE,
            provider_label="Google",
            max_tokens=8192,
            variant="gemini-1.5-flash",
            description="Fast, reliable Gemini model for most use cases",
        ),
        ModelSpec(
            id=ModelId.OPENAI,
            name="GPT-4 Turbo",
            group=OPENAI,
            provider_label="OpenAI",
            max_tokens=4096,
            description="Premium OpenAI model",
        ),
        ModelSpec(
            id=ModelId.CLAUDE,
            name="Claude 3 Sonnet",
            group=ANTHROPIC,
            provider_label="Anthropic",
            max_tokens=4096,
            description="Premium Anthropic model",
        ),
    )
}


def get_model_spec(model_id: ModelId | str) -> ModelSpec:
    """Look up a model; raises ValueError for unknown identifiers."""
    try:
        return MODEL_CATALOG[ModelId(model_id)]
    except (KeyError, ValueError) as exc:
        available = ", ".join(m.value for m in MODEL_CATALOG)
        raise ValueError(f"Unknown model '{model_id}'. Available: {available}") from exc


__all__ = [
    "GOOGLE",
    "OPENAI",
    "ANTHROPIC",
    "PROVIDER_GROUPS",
    "ModelSpec",
    "MODEL_CATALOG",
    "get_model_spec",
]
