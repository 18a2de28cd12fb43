"""Request and response envelopes for the HTTP API."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pdf_enhancer.domain.schemas import ExtractedContent, ProcessingOptions

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Uniform JSON envelope returned by every JSON endpoint."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None


class ExtractRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={"example": {"url": "https://example.com/article"}}
    )

    url: Optional[str] = Field(default=None, description="Page to extract")
    text: Optional[str] = Field(default=None, description="Raw text used instead of a URL")


class EnhanceRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: ExtractedContent
    options: ProcessingOptions


class ModelCatalogResponse(BaseModel):
    availability: dict[str, bool]
    models: list[dict]


__all__ = ["APIResponse", "ExtractRequest", "EnhanceRequest", "ModelCatalogResponse"]
