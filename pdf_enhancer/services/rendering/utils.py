"""Small helpers for document rendering."""

from __future__ import annotations

import math
import re

WORDS_PER_MINUTE = 200
PDF_SUFFIX = ".pdf"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def estimate_reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes needed to read ``text``; 0 for empty text."""
    word_count = len((text or "").split())
    return math.ceil(word_count / words_per_minute)


def sanitize_filename(name: str) -> str:
    """Lowercase, hyphen-separated, alphanumeric-only file stem."""
    return _NON_ALNUM_RE.sub("-", (name or "").lower()).strip("-")


def document_filename(title: str) -> str:
    return sanitize_filename(f"{title}-enhanced") + PDF_SUFFIX


__all__ = [
    "WORDS_PER_MINUTE",
    "estimate_reading_time",
    "sanitize_filename",
    "document_filename",
]
