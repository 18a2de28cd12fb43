"""Ingest helpers: page fetching, HTML parsing and text normalization."""

from .fetcher import FetchedPage, PageFetcher
from .html_parser import CONTENT_SELECTORS, PageMetadata, extract_metadata, extract_readable_text
from .normalizer import collapse_whitespace, html_to_text

__all__ = [
    "FetchedPage",
    "PageFetcher",
    "CONTENT_SELECTORS",
    "PageMetadata",
    "extract_metadata",
    "extract_readable_text",
    "collapse_whitespace",
    "html_to_text",
]
