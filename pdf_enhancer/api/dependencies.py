"""FastAPI dependency providers for services."""

from functools import lru_cache

from pdf_enhancer.llm_infrastructure.llm import ModelDispatcher
from pdf_enhancer.services.document_service import DocumentService
from pdf_enhancer.services.enhancement_service import EnhancementService
from pdf_enhancer.services.extraction_service import ContentExtractionService


@lru_cache
def get_model_dispatcher() -> ModelDispatcher:
    """Dispatcher built once from the credentials present at startup."""
    return ModelDispatcher()


@lru_cache
def get_extraction_service() -> ContentExtractionService:
    return ContentExtractionService()


@lru_cache
def get_enhancement_service() -> EnhancementService:
    return EnhancementService(get_model_dispatcher())


@lru_cache
def get_document_service() -> DocumentService:
    return DocumentService()
