"""Assemble enhanced content into printable HTML.

Section order is fixed: cover, table of contents, enhanced body, original
appendix, citations. Optional sections are left out entirely when disabled
or empty.
"""

from __future__ import annotations

from datetime import date
from html import escape

from pdf_enhancer.domain.schemas import Citation, EnhancedContent, RenderOptions, TOCItem
from pdf_enhancer.llm_infrastructure.enhancement.outline import render_outline_html

from .markdown import markdown_to_html, text_to_paragraphs
from .styles import PDF_STYLES
from .utils import estimate_reading_time


class DocumentAssembler:
    """Builds the HTML document handed to the PDF renderer."""

    def __init__(self, styles: str = PDF_STYLES) -> None:
        self.styles = styles

    def assemble(
        self,
        content: EnhancedContent,
        options: RenderOptions | None = None,
        *,
        generated_on: date | None = None,
    ) -> str:
        options = options or RenderOptions()
        generated_on = generated_on or date.today()
        title = escape(content.original.title)

        sections = [self._cover(content, generated_on)]
        if options.include_table_of_contents and content.table_of_contents:
            sections.append(self._table_of_contents(content.table_of_contents))
        sections.append(self._body(content))
        if options.include_original:
            sections.append(self._original(content))
        if options.include_citations and content.citations:
            sections.append(self._citations(content.citations))

        body = "\n".join(sections)
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '<meta charset="UTF-8">\n'
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            f"<title>{title} - Enhanced</title>\n"
            f"<style>{self.styles}</style>\n"
            "</head>\n"
            f"<body>\n{body}\n</body>\n"
            "</html>\n"
        )

    def _cover(self, content: EnhancedContent, generated_on: date) -> str:
        original = content.original
        reading_time = estimate_reading_time(content.enhanced)
        lines = [
            '<div class="cover-page">',
            '<div class="cover-content">',
            f'<h1 class="cover-title">{escape(original.title)}</h1>',
        ]
        if original.author:
            lines.append(f'<p class="cover-author">By {escape(original.author)}</p>')
        lines.append('<div class="cover-metadata">')
        lines.append(
            f"<p><strong>Enhanced with:</strong> "
            f"{escape(content.model.value.upper())} ({escape(content.action.value)})</p>"
        )
        lines.append(f"<p><strong>Generated:</strong> {generated_on.isoformat()}</p>")
        lines.append(f"<p><strong>Estimated reading time:</strong> {reading_time} minutes</p>")
        if original.url:
            url = escape(original.url)
            lines.append(f'<p><strong>Original source:</strong> <a href="{url}">{url}</a></p>')
        lines.extend(["</div>", "</div>", "</div>"])
        return "\n".join(lines)

    def _table_of_contents(self, toc: list[TOCItem]) -> str:
        return (
            '<div class="toc">\n'
            "<h1>Table of Contents</h1>\n"
            f"{render_outline_html(toc)}\n"
            "</div>"
        )

    def _body(self, content: EnhancedContent) -> str:
        return (
            '<div class="main-content">\n'
            "<h1>Enhanced Content</h1>\n"
            f'<div class="content-body">\n{markdown_to_html(content.enhanced)}\n</div>\n'
            "</div>"
        )

    def _original(self, content: EnhancedContent) -> str:
        reading_time = estimate_reading_time(content.original.content)
        return (
            '<div class="page-break"></div>\n'
            '<div class="original-content">\n'
            "<h1>Original Content</h1>\n"
            f'<p class="reading-time">Estimated reading time: {reading_time} minutes</p>\n'
            f'<div class="content-body">\n{text_to_paragraphs(content.original.content)}\n</div>\n'
            "</div>"
        )

    def _citations(self, citations: list[Citation]) -> str:
        entries = []
        for index, citation in enumerate(citations, start=1):
            meta = []
            if citation.author:
                meta.append(f"Author: {escape(citation.author)}")
            if citation.url:
                url = escape(citation.url)
                meta.append(f'URL: <a href="{url}">{url}</a>')
            if citation.published_date:
                meta.append(f"Published: {escape(citation.published_date)}")
            if citation.description:
                meta.append(f"Description: {escape(citation.description)}")
            entries.append(
                '<div class="citation">'
                f'<div class="citation-title">[{index}] {escape(citation.title)}</div>'
                f'<div class="citation-meta">{"<br>".join(meta)}</div>'
                "</div>"
            )
        return (
            '<div class="citations">\n'
            "<h1>Citations &amp; References</h1>\n"
            + "\n".join(entries)
            + "\n</div>"
        )


def assemble_html(
    content: EnhancedContent,
    options: RenderOptions | None = None,
    *,
    generated_on: date | None = None,
) -> str:
    return DocumentAssembler().assemble(content, options, generated_on=generated_on)


__all__ = ["DocumentAssembler", "assemble_html"]
