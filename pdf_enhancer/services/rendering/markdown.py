"""Minimal line-oriented Markdown to HTML conversion.

Handles headings, bold/italic markers, links, simple bullet and numbered
lists, and paragraphs. Tables, code blocks and nested emphasis are passed
through as text. Heading ids come from the outline scanner, so every table of
contents anchor resolves.
"""

from __future__ import annotations

import html
import re

from pdf_enhancer.llm_infrastructure.enhancement.outline import heading_id, match_heading

_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)\s]*)\)")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_BULLET_RE = re.compile(r"^\s*[-*+][ \t]+(.*)$")
_NUMBERED_RE = re.compile(r"^\s*\d+[.)][ \t]+(.*)$")
_PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")

_UNSAFE_SCHEMES = ("javascript:", "data:", "vbscript:")


def _emphasis(text: str) -> str:
    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def _link(match: re.Match[str]) -> str:
    label, href = _emphasis(match.group(1)), match.group(2)
    if href.lower().startswith(_UNSAFE_SCHEMES):
        return label
    return f'<a href="{href}">{label}</a>'


def render_inline(text: str) -> str:
    """Escape text, then apply link, bold and italic markers.

    Links are swapped for NUL-delimited placeholders while emphasis runs, so
    markers inside an href stay literal and emphasis may still wrap a link.
    """
    links: list[str] = []

    def stash(match: re.Match[str]) -> str:
        links.append(_link(match))
        return f"\x00{len(links) - 1}\x00"

    out = _LINK_RE.sub(stash, html.escape(text.replace("\x00", "")))
    out = _emphasis(out)
    return _PLACEHOLDER_RE.sub(lambda m: links[int(m.group(1))], out)


class _BlockWriter:
    def __init__(self) -> None:
        self.blocks: list[str] = []
        self._paragraph: list[str] = []
        self._list_tag: str | None = None
        self._list_items: list[str] = []

    def paragraph_line(self, line: str) -> None:
        self.close_list()
        self._paragraph.append(render_inline(line))

    def list_item(self, tag: str, text: str) -> None:
        self.close_paragraph()
        if self._list_tag != tag:
            self.close_list()
            self._list_tag = tag
        self._list_items.append(f"<li>{render_inline(text)}</li>")

    def raw(self, block: str) -> None:
        self.close()
        self.blocks.append(block)

    def close_paragraph(self) -> None:
        if self._paragraph:
            self.blocks.append("<p>" + "<br>".join(self._paragraph) + "</p>")
            self._paragraph = []

    def close_list(self) -> None:
        if self._list_tag:
            items = "".join(self._list_items)
            self.blocks.append(f"<{self._list_tag}>{items}</{self._list_tag}>")
        self._list_tag = None
        self._list_items = []

    def close(self) -> None:
        self.close_paragraph()
        self.close_list()


def markdown_to_html(text: str) -> str:
    writer = _BlockWriter()
    headings = 0

    for line in (text or "").splitlines():
        if not line.strip():
            writer.close()
            continue

        heading = match_heading(line)
        if heading is not None:
            level, title = heading
            headings += 1
            writer.raw(f'<h{level} id="{heading_id(headings)}">{render_inline(title)}</h{level}>')
            continue

        bullet = _BULLET_RE.match(line)
        if bullet:
            writer.list_item("ul", bullet.group(1))
            continue

        numbered = _NUMBERED_RE.match(line)
        if numbered:
            writer.list_item("ol", numbered.group(1))
            continue

        writer.paragraph_line(line.strip())

    writer.close()
    return "\n".join(writer.blocks)


def text_to_paragraphs(text: str) -> str:
    """Escape plain text and wrap each non-empty line in <p>."""
    lines = [line.strip() for line in (text or "").splitlines()]
    return "\n".join(f"<p>{html.escape(line)}</p>" for line in lines if line)


__all__ = ["markdown_to_html", "render_inline", "text_to_paragraphs"]
