"""Enhancement helpers: prompt composition, outline and citations."""

from .citations import build_citations, generate_citation_id, should_cite
from .outline import (
    HeadingMatch,
    build_outline,
    iter_outline,
    match_heading,
    render_outline_html,
    scan_headings,
)
from .prompts import ComposedPrompt, compose_prompt

__all__ = [
    "build_citations",
    "generate_citation_id",
    "should_cite",
    "HeadingMatch",
    "build_outline",
    "iter_outline",
    "match_heading",
    "render_outline_html",
    "scan_headings",
    "ComposedPrompt",
    "compose_prompt",
]
