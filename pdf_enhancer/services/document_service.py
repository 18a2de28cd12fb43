"""Document generation service: EnhancedContent -> PDF bytes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pdf_enhancer.domain.errors import RenderFailure
from pdf_enhancer.domain.schemas import PDFGenerationRequest, RenderOptions

from .rendering.assembler import DocumentAssembler
from .rendering.renderer import BasePdfRenderer, PlaywrightPdfRenderer
from .rendering.utils import document_filename

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


@dataclass
class RenderedDocument:
    """A rendered artifact ready to be sent or saved."""

    filename: str
    content: bytes
    media_type: str = PDF_MEDIA_TYPE


class DocumentService:
    """Assembles printable HTML and renders it to PDF."""

    def __init__(
        self,
        renderer: BasePdfRenderer | None = None,
        assembler: DocumentAssembler | None = None,
    ) -> None:
        self.renderer = renderer or PlaywrightPdfRenderer()
        self.assembler = assembler or DocumentAssembler()

    def generate(self, request: PDFGenerationRequest) -> RenderedDocument:
        content = request.content
        options = request.options or RenderOptions()
        title = content.original.title

        html = self.assembler.assemble(content, options)
        logger.info("Rendering '%s' (%d chars of HTML)", title, len(html))
        try:
            pdf = self.renderer.render(html, title=title)
        except Exception as exc:
            logger.exception("PDF rendering failed for '%s'", title)
            raise RenderFailure(f"Failed to generate PDF: {exc}") from exc

        return RenderedDocument(filename=document_filename(title), content=pdf)


__all__ = ["DocumentService", "RenderedDocument", "PDF_MEDIA_TYPE"]
