"""Content extraction service: URL or raw text to ExtractedContent."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from pdf_enhancer.config.settings import ExtractionSettings, extraction_settings
from pdf_enhancer.domain.errors import ExtractionFailure, ValidationError
from pdf_enhancer.domain.schemas import ContentMetadata, ExtractedContent, is_valid_url

from .ingest.fetcher import PageFetcher
from .ingest.html_parser import extract_metadata, extract_readable_text

logger = logging.getLogger(__name__)

TEXT_INPUT_TITLE = "User Provided Text"
TEXT_INPUT_AUTHOR = "User Input"


class ContentExtractionService:
    """Turns user input into immutable ExtractedContent."""

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        settings: ExtractionSettings | None = None,
    ) -> None:
        self.settings = settings or extraction_settings
        self.fetcher = fetcher or PageFetcher(
            user_agent=self.settings.user_agent,
            timeout=self.settings.timeout,
        )

    def extract(self, url: str | None = None, text: str | None = None) -> ExtractedContent:
        """Extract from raw text when given, otherwise from the URL."""
        if not url and not text:
            raise ValidationError("Either URL or text content is required")
        if text:
            return self.from_text(text)
        return self.from_url(url or "")

    def from_text(self, text: str) -> ExtractedContent:
        if len(text.strip()) < self.settings.min_text_length:
            raise ValidationError(
                f"Content must be at least {self.settings.min_text_length} characters long"
            )
        logger.info("Accepted raw text input (%d chars)", len(text))
        return ExtractedContent(
            title=TEXT_INPUT_TITLE,
            author=TEXT_INPUT_AUTHOR,
            published_date=datetime.now(timezone.utc).isoformat(),
            content=text,
        )

    def from_url(self, url: str) -> ExtractedContent:
        if not is_valid_url(url):
            raise ValidationError("Invalid URL format")

        logger.info("Extracting content from %s", url)
        page = self.fetcher.fetch(url)

        meta = extract_metadata(page.html, url)
        body = extract_readable_text(page.html, min_length=self.settings.min_content_length)
        if len(body) < self.settings.min_content_length:
            logger.warning("Only %d chars of readable text at %s", len(body), url)
            raise ExtractionFailure("Could not extract meaningful content from the provided URL")

        logger.info("Extracted %d chars from %s (title=%r)", len(body), url, meta.title)
        return ExtractedContent(
            title=meta.title.strip(),
            author=meta.author,
            published_date=meta.published_date,
            content=body,
            url=url,
            metadata=ContentMetadata(
                description=meta.description,
                image=meta.image,
                site_name=meta.site_name,
            ),
        )


__all__ = ["ContentExtractionService", "TEXT_INPUT_TITLE", "TEXT_INPUT_AUTHOR"]
