"""Route composed prompts to the provider serving the selected model.

Provider adapters are built once, at construction time, from the
credentials available then. A model whose provider has no adapter fails
with ProviderUnavailable before any network I/O happens.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from pdf_enhancer.config.settings import ProviderSettings, provider_settings
from pdf_enhancer.domain.errors import ProviderError, ProviderUnavailable
from pdf_enhancer.domain.schemas import ModelId

from .base import BaseLLM, LLMResponseError
from .catalog import ANTHROPIC, GOOGLE, MODEL_CATALOG, OPENAI, PROVIDER_GROUPS, ModelSpec, get_model_spec
from .registry import get_llm

if TYPE_CHECKING:
    from pdf_enhancer.llm_infrastructure.enhancement.prompts import ComposedPrompt

logger = logging.getLogger(__name__)

# Substituted when a provider answers successfully with no text
FALLBACK_TEXT = "No response generated"


def _adapter_kwargs(group: str, settings: ProviderSettings) -> dict[str, Any]:
    if group == GOOGLE:
        return {"base_url": settings.gemini_base_url}
    if group == OPENAI:
        return {"base_url": settings.openai_base_url, "model": settings.openai_model}
    if group == ANTHROPIC:
        return {
            "base_url": settings.anthropic_base_url,
            "model": settings.anthropic_model,
            "api_version": settings.anthropic_version,
        }
    return {}


class ModelDispatcher:
    """Single entry point for completions across all providers."""

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        *,
        llms: dict[str, BaseLLM] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or provider_settings
        if llms is not None:
            self._llms = dict(llms)
        else:
            self._llms = self._build_llms(client)
        logger.info(
            "Model dispatcher ready (providers: %s)",
            ", ".join(sorted(self._llms)) or "none",
        )

    def _build_llms(self, client: httpx.Client | None) -> dict[str, BaseLLM]:
        llms: dict[str, BaseLLM] = {}
        for group in PROVIDER_GROUPS:
            api_key = self.settings.credential(group)
            if api_key is None:
                logger.info("No credential for provider '%s'; its models are unavailable", group)
                continue
            llms[group] = get_llm(
                group,
                version="v1",
                api_key=api_key,
                temperature=self.settings.temperature,
                timeout=self.settings.timeout,
                client=client,
                **_adapter_kwargs(group, self.settings),
            )
        return llms

    def availability(self) -> dict[str, bool]:
        """Which provider groups can serve requests."""
        return {group: group in self._llms for group in PROVIDER_GROUPS}

    def list_models(self) -> list[dict[str, Any]]:
        """Catalog entries annotated with availability status."""
        models = []
        for spec in MODEL_CATALOG.values():
            available = spec.group in self._llms
            models.append(
                {
                    "id": spec.id.value,
                    "name": spec.name,
                    "provider": spec.provider_label,
                    "status": "AVAILABLE" if available else "API KEY REQUIRED",
                    "statusColor": "green" if available else "orange",
                    "available": available,
                    "isDefault": spec.is_default,
                    "description": (
                        spec.description if available else f"{spec.description} (requires API key)"
                    ),
                }
            )
        return models

    def complete(self, prompt: "ComposedPrompt", model_id: ModelId | str) -> str:
        """Run the prompt on the selected model and return plain text.

        Raises:
            ProviderUnavailable: The model's provider has no credential.
            ProviderError: The call failed or the answer was unusable.
        """
        spec: ModelSpec = get_model_spec(model_id)
        llm = self._llms.get(spec.group)
        if llm is None:
            raise ProviderUnavailable(
                f"{spec.provider_label} API key not configured",
                provider=spec.provider_label,
            )

        logger.info(
            "Requesting completion from %s (model=%s, prompt_chars=%d)",
            llm.provider_name,
            spec.variant or spec.id.value,
            len(prompt.user),
        )
        try:
            response = llm.complete(
                prompt.system,
                prompt.user,
                model=spec.variant,
                max_tokens=spec.max_tokens,
                temperature=self.settings.temperature,
            )
        except httpx.HTTPStatusError as exc:
            logger.error(
                "%s returned HTTP %s: %s",
                llm.provider_name,
                exc.response.status_code,
                exc.response.text[:500],
            )
            raise ProviderError(
                f"HTTP {exc.response.status_code} from upstream",
                provider=llm.provider_name,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("%s request failed: %s", llm.provider_name, exc)
            raise ProviderError(str(exc) or exc.__class__.__name__, provider=llm.provider_name) from exc
        except (LLMResponseError, ValueError) as exc:
            logger.error("%s returned an unusable response: %s", llm.provider_name, exc)
            raise ProviderError(str(exc), provider=llm.provider_name) from exc

        text = response.text.strip() if response.text else ""
        if not text:
            logger.warning("%s returned no text; using fallback", llm.provider_name)
            return FALLBACK_TEXT
        return text


__all__ = ["ModelDispatcher", "FALLBACK_TEXT"]
