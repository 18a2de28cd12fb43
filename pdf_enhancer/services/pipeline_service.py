"""Sequential extract -> enhance -> render pipeline.

Used by the CLI to produce a PDF on disk in one call. Stage errors are not
caught here; they reach the caller exactly as the stage raised them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pdf_enhancer.domain.schemas import (
    EnhancedContent,
    PDFGenerationRequest,
    ProcessingOptions,
    RenderOptions,
)

from .document_service import DocumentService
from .enhancement_service import EnhancementService
from .extraction_service import ContentExtractionService

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    enhanced: EnhancedContent
    path: Path


class ContentPipeline:
    def __init__(
        self,
        extractor: ContentExtractionService | None = None,
        enhancer: EnhancementService | None = None,
        documents: DocumentService | None = None,
    ) -> None:
        self.extractor = extractor or ContentExtractionService()
        self.enhancer = enhancer or EnhancementService()
        self.documents = documents or DocumentService()

    def run(
        self,
        *,
        url: str | None = None,
        text: str | None = None,
        options: ProcessingOptions | None = None,
        render_options: RenderOptions | None = None,
        output_dir: str | Path = ".",
    ) -> PipelineResult:
        options = options or ProcessingOptions()
        render_options = render_options or RenderOptions(include_original=options.include_original)

        content = self.extractor.extract(url=url, text=text)
        enhanced = self.enhancer.enhance(content, options)
        document = self.documents.generate(
            PDFGenerationRequest(content=enhanced, options=render_options)
        )

        out_dir = Path(output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / document.filename
        path.write_bytes(document.content)
        logger.info("Wrote %s (%d bytes)", path, len(document.content))
        return PipelineResult(enhanced=enhanced, path=path)


__all__ = ["ContentPipeline", "PipelineResult"]
