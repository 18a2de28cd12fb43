"""Readable-text and metadata extraction from article HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

from .normalizer import collapse_whitespace, html_to_text

logger = logging.getLogger(__name__)

# Containers most likely to hold the article body, in priority order
CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    '[role="main"]',
    "main",
    ".content",
    ".post-content",
    ".entry-content",
    ".article-content",
    "#content",
    ".main-content",
)


@dataclass
class PageMetadata:
    """Metadata scraped from the page head and byline markup."""

    title: str = "Untitled"
    author: str | None = None
    published_date: str | None = None
    description: str | None = None
    image: str | None = None
    site_name: str | None = None


def _meta(soup: BeautifulSoup, *, name: str | None = None, prop: str | None = None) -> str:
    attrs = {"name": name} if name else {"property": prop}
    tag = soup.find("meta", attrs=attrs)
    if isinstance(tag, Tag):
        return (tag.get("content") or "").strip()
    return ""


def _first_text(soup: BeautifulSoup, selector: str) -> str:
    tag = soup.select_one(selector)
    return collapse_whitespace(tag.get_text(" ")) if tag else ""


def extract_metadata(html: str, url: str | None = None) -> PageMetadata:
    """Pick title, byline, date, description, image and site name."""
    soup = BeautifulSoup(html, "html.parser")

    title = (
        _first_text(soup, "title")
        or _meta(soup, prop="og:title")
        or _first_text(soup, "h1")
        or "Untitled"
    )
    description = _meta(soup, name="description") or _meta(soup, prop="og:description")
    author = (
        _meta(soup, name="author")
        or _meta(soup, prop="article:author")
        or _first_text(soup, ".author")
        or _first_text(soup, '[rel="author"]')
    )

    published = _meta(soup, prop="article:published_time")
    if not published:
        time_tag = soup.select_one("time[datetime]")
        published = (time_tag.get("datetime") or "").strip() if time_tag else ""
    if not published:
        published = _first_text(soup, "time")

    image = _meta(soup, prop="og:image") or _meta(soup, name="twitter:image")
    site_name = _meta(soup, prop="og:site_name")
    if not site_name and url:
        site_name = urlparse(url).hostname or ""

    return PageMetadata(
        title=title,
        author=author or None,
        published_date=published or None,
        description=description or None,
        image=image or None,
        site_name=site_name or None,
    )


def extract_readable_text(html: str, *, min_length: int = 100) -> str:
    """Return the article body text.

    The longest of the candidate containers wins; when none yields at least
    ``min_length`` characters the whole body is used instead.
    """
    soup = BeautifulSoup(html, "html.parser")

    best_text = ""
    best_selector = None
    for selector in CONTENT_SELECTORS:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = html_to_text(element)
        if len(text) > len(best_text):
            best_text = text
            best_selector = selector

    if len(best_text) >= min_length:
        logger.debug("Content container '%s' selected (%d chars)", best_selector, len(best_text))
        return best_text

    body = soup.body or soup
    logger.debug("No content container reached %d chars; using document body", min_length)
    return html_to_text(body)


__all__ = ["CONTENT_SELECTORS", "PageMetadata", "extract_metadata", "extract_readable_text"]
