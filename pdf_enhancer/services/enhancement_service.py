"""Enhancement service orchestrating prompt -> model -> outline -> citations."""

from __future__ import annotations

import logging

from pdf_enhancer.config.settings import extraction_settings
from pdf_enhancer.domain.errors import ValidationError
from pdf_enhancer.domain.schemas import (
    EnhancedContent,
    ExtractedContent,
    ProcessingOptions,
    validate_content,
)
from pdf_enhancer.llm_infrastructure.enhancement import (
    build_citations,
    build_outline,
    compose_prompt,
    should_cite,
)
from pdf_enhancer.llm_infrastructure.llm import ModelDispatcher

logger = logging.getLogger(__name__)


class EnhancementService:
    """Runs one enhancement request against the selected model."""

    def __init__(
        self,
        dispatcher: ModelDispatcher | None = None,
        min_content_length: int | None = None,
    ) -> None:
        self.dispatcher = dispatcher or ModelDispatcher()
        self.min_content_length = (
            min_content_length
            if min_content_length is not None
            else extraction_settings.min_text_length
        )

    def enhance(self, content: ExtractedContent, options: ProcessingOptions) -> EnhancedContent:
        errors = validate_content(content, min_length=self.min_content_length)
        if errors:
            raise ValidationError("; ".join(errors))

        logger.info(
            "Enhancing '%s' (action=%s, model=%s)",
            content.title,
            options.action.value,
            options.model.value,
        )
        prompt = compose_prompt(content, options.action)
        enhanced_text = self.dispatcher.complete(prompt, options.model)

        citations = build_citations(content, enhanced_text) if should_cite(options) else []
        outline = build_outline(enhanced_text)
        logger.info(
            "Enhanced text: %d chars, %d top-level headings, %d citations",
            len(enhanced_text),
            len(outline),
            len(citations),
        )

        return EnhancedContent(
            original=content,
            enhanced=enhanced_text,
            action=options.action,
            model=options.model,
            citations=citations or None,
            table_of_contents=outline or None,
        )


__all__ = ["EnhancementService"]
