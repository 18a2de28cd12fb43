"""Citation generation for validation reports.

Only the source article itself is cited. Mining the enhanced text for the
sources it mentions would plug in here.
"""

from __future__ import annotations

import time
import uuid

from pdf_enhancer.domain.schemas import Action, Citation, ExtractedContent, ProcessingOptions


def generate_citation_id() -> str:
    return f"cite-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def should_cite(options: ProcessingOptions) -> bool:
    """Citations are produced only for validation with citations requested."""
    return options.generate_citations and options.action == Action.VALIDATE


def build_citations(original: ExtractedContent, enhanced_text: str) -> list[Citation]:
    """Derive the reference list for an enhanced document."""
    citations: list[Citation] = []

    if original.url:
        citations.append(
            Citation(
                id=generate_citation_id(),
                title=original.title,
                url=original.url,
                author=original.author,
                published_date=original.published_date,
                description="Original source article",
            )
        )

    return citations


__all__ = ["build_citations", "generate_citation_id", "should_cite"]
