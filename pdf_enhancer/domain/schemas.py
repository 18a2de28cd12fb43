"""Pydantic schemas for extracted, enhanced and rendered content.

Records are frozen once created. Python attributes are snake_case; the JSON
wire format uses camelCase aliases and accepts either spelling on input.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ModelId(str, Enum):
    """Selectable model identifiers."""

    GEMINI_2_0_FLASH_EXP = "gemini-2.0-flash-exp"
    GEMINI_1_5_FLASH_LATEST = "gemini-1.5-flash-latest"
    GEMINI_1_5_FLASH = "gemini-1.5-flash"
    OPENAI = "openai"
    CLAUDE = "claude"


class Action(str, Enum):
    """Enhancement actions."""

    SUMMARIZE = "summarize"
    EXPAND = "expand"
    VALIDATE = "validate"


class ContentMetadata(_Record):
    """Page-level metadata scraped alongside the article text."""

    description: str | None = None
    image: str | None = None
    site_name: str | None = None


class ExtractedContent(_Record):
    """Readable content pulled from a URL or supplied as raw text."""

    title: str = Field(..., description="Article title")
    author: str | None = None
    published_date: str | None = Field(
        default=None, description="ISO-8601 timestamp or free text"
    )
    content: str = Field(..., description="Plain-text article body")
    url: str | None = Field(default=None, description="Source URL if input was a URL")
    metadata: ContentMetadata | None = None


class ProcessingOptions(_Record):
    """Per-request enhancement options."""

    model: ModelId = ModelId.GEMINI_2_0_FLASH_EXP
    action: Action = Action.SUMMARIZE
    include_original: bool = False
    generate_citations: bool = False


class Citation(_Record):
    """A reference to a source used in the enhanced text."""

    id: str
    title: str
    url: str | None = None
    author: str | None = None
    published_date: str | None = None
    description: str | None = None


class TOCItem(_Record):
    """Table-of-contents node; children are strictly deeper headings."""

    id: str
    title: str
    level: int = Field(..., ge=1, le=6)
    children: list[TOCItem] = Field(default_factory=list)


class EnhancedContent(_Record):
    """Result of one enhancement request."""

    original: ExtractedContent
    enhanced: str
    action: Action
    model: ModelId
    citations: list[Citation] | None = None
    table_of_contents: list[TOCItem] | None = None


class RenderOptions(_Record):
    """Toggles for the optional sections of the rendered document."""

    include_table_of_contents: bool = True
    include_citations: bool = True
    include_original: bool = False


class PDFGenerationRequest(_Record):
    content: EnhancedContent
    options: RenderOptions | None = None


def is_valid_url(value: str) -> bool:
    """Accept absolute http(s) URLs with a host."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_content(content: ExtractedContent, *, min_length: int = 50) -> list[str]:
    """Return a list of problems that make content unfit for enhancement."""
    errors: list[str] = []

    if not content.title or not content.title.strip():
        errors.append("Content title is required")

    if not content.content or len(content.content.strip()) < min_length:
        errors.append(f"Content must be at least {min_length} characters long")

    if content.url and not is_valid_url(content.url):
        errors.append("Invalid URL format")

    return errors


__all__ = [
    "ModelId",
    "Action",
    "ContentMetadata",
    "ExtractedContent",
    "ProcessingOptions",
    "Citation",
    "TOCItem",
    "EnhancedContent",
    "RenderOptions",
    "PDFGenerationRequest",
    "is_valid_url",
    "validate_content",
]
