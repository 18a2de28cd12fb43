"""Table of contents (outline) building from Markdown headings.

Headings are recognized line by line and numbered in scan order
(``heading-1``, ``heading-2``, ...). The Markdown renderer uses the same
scanner, so outline anchors always resolve in the rendered document.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from pdf_enhancer.domain.schemas import TOCItem

# "## Title": 1-6 markers, whitespace, then the title
_HEADING_RE = re.compile(r"^(?P<marks>#{1,6})[ \t]+(?P<title>\S.*?)\s*$")


@dataclass(frozen=True)
class HeadingMatch:
    """A heading found while scanning text."""

    level: int
    title: str
    id: str


def heading_id(index: int) -> str:
    """Anchor id for the index-th heading (1-based)."""
    return f"heading-{index}"


def match_heading(line: str) -> tuple[int, str] | None:
    """Return (level, title) when the line is a heading."""
    m = _HEADING_RE.match(line)
    if not m:
        return None
    return len(m.group("marks")), m.group("title")


def scan_headings(text: str) -> list[HeadingMatch]:
    """Flat list of headings in document order."""
    headings: list[HeadingMatch] = []
    for line in text.splitlines():
        found = match_heading(line)
        if found is None:
            continue
        level, title = found
        headings.append(HeadingMatch(level=level, title=title, id=heading_id(len(headings) + 1)))
    return headings


def build_outline(text: str) -> list[TOCItem]:
    """Fold the flat heading list into a tree.

    Stack discipline: pop while the top's level is >= the new item's level,
    attach to the remaining top (or as a root), then push the new item.
    """
    roots: list[TOCItem] = []
    stack: list[TOCItem] = []

    for heading in scan_headings(text):
        item = TOCItem(id=heading.id, title=heading.title, level=heading.level)

        while stack and stack[-1].level >= item.level:
            stack.pop()

        if stack:
            stack[-1].children.append(item)
        else:
            roots.append(item)

        stack.append(item)

    return roots


def iter_outline(items: Iterable[TOCItem]) -> Iterator[tuple[int, TOCItem]]:
    """Depth-first, document-order walk yielding (depth, item)."""
    stack: list[tuple[int, TOCItem]] = [(0, item) for item in reversed(list(items))]
    while stack:
        depth, item = stack.pop()
        yield depth, item
        for child in reversed(item.children):
            stack.append((depth + 1, child))


def render_outline_html(items: Iterable[TOCItem]) -> str:
    """Nested <ul> markup linking each entry to its heading anchor."""
    parts: list[str] = ["<ul>"]
    stack: list[Iterator[TOCItem]] = [iter(items)]

    while stack:
        item = next(stack[-1], None)
        if item is None:
            stack.pop()
            parts.append("</ul>")
            if stack:
                parts.append("</li>")
            continue

        parts.append(
            f'<li class="level-{item.level}">'
            f'<a href="#{html.escape(item.id)}">{html.escape(item.title)}</a>'
        )
        if item.children:
            parts.append("<ul>")
            stack.append(iter(item.children))
        else:
            parts.append("</li>")

    return "".join(parts)


def count_outline(items: Iterable[TOCItem]) -> int:
    return sum(1 for _ in iter_outline(items))


__all__ = [
    "HeadingMatch",
    "heading_id",
    "match_heading",
    "scan_headings",
    "build_outline",
    "iter_outline",
    "render_outline_html",
    "count_outline",
]
