"""Domain records and the error taxonomy."""

from .errors import (
    ExtractionFailure,
    PipelineError,
    ProviderError,
    ProviderUnavailable,
    RenderFailure,
    ValidationError,
)
from .schemas import (
    Action,
    Citation,
    ContentMetadata,
    EnhancedContent,
    ExtractedContent,
    ModelId,
    PDFGenerationRequest,
    ProcessingOptions,
    RenderOptions,
    TOCItem,
    is_valid_url,
    validate_content,
)

__all__ = [
    "PipelineError",
    "ValidationError",
    "ExtractionFailure",
    "ProviderUnavailable",
    "ProviderError",
    "RenderFailure",
    "Action",
    "Citation",
    "ContentMetadata",
    "EnhancedContent",
    "ExtractedContent",
    "ModelId",
    "PDFGenerationRequest",
    "ProcessingOptions",
    "RenderOptions",
    "TOCItem",
    "is_valid_url",
    "validate_content",
]
