"""HTML to plain-text normalization."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

_WS_RE = re.compile(r"\s+")

# Elements whose text is never readable content
NON_CONTENT_TAGS = ("script", "style", "noscript", "template")


def collapse_whitespace(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def html_to_text(markup: str | Tag) -> str:
    """Strip markup and return whitespace-collapsed readable text."""
    if isinstance(markup, Tag):
        soup = BeautifulSoup(str(markup), "html.parser")
    else:
        soup = BeautifulSoup(markup or "", "html.parser")
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    return collapse_whitespace(soup.get_text(separator=" "))


__all__ = ["collapse_whitespace", "html_to_text", "NON_CONTENT_TAGS"]
