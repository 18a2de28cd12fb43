"""Document assembly and PDF rendering."""

from .assembler import DocumentAssembler, assemble_html
from .markdown import markdown_to_html, render_inline, text_to_paragraphs
from .renderer import BasePdfRenderer, PlaywrightPdfRenderer
from .utils import document_filename, estimate_reading_time, sanitize_filename

__all__ = [
    "DocumentAssembler",
    "assemble_html",
    "markdown_to_html",
    "render_inline",
    "text_to_paragraphs",
    "BasePdfRenderer",
    "PlaywrightPdfRenderer",
    "document_filename",
    "estimate_reading_time",
    "sanitize_filename",
]
