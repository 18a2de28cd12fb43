"""Application services: extraction, enhancement, document rendering."""

from .document_service import DocumentService, RenderedDocument
from .enhancement_service import EnhancementService
from .extraction_service import ContentExtractionService
from .pipeline_service import ContentPipeline, PipelineResult

__all__ = [
    "ContentExtractionService",
    "EnhancementService",
    "DocumentService",
    "RenderedDocument",
    "ContentPipeline",
    "PipelineResult",
]
