"""Markdown conversion, HTML assembly and renderer options."""

from __future__ import annotations

import re
from datetime import date

import pytest

from pdf_enhancer.config.settings import RenderSettings
from pdf_enhancer.domain.schemas import (
    Action,
    Citation,
    EnhancedContent,
    ExtractedContent,
    ModelId,
    RenderOptions,
)
from pdf_enhancer.llm_infrastructure.enhancement.outline import build_outline, iter_outline
from pdf_enhancer.services.rendering import (
    PlaywrightPdfRenderer,
    assemble_html,
    document_filename,
    estimate_reading_time,
    markdown_to_html,
    render_inline,
    sanitize_filename,
    text_to_paragraphs,
)

ENHANCED = """# Summary
The **main** point is *clear*.
- first
- second

## Details
1. one
2. two
"""


@pytest.fixture
def enhanced():
    original = ExtractedContent(
        title="Solar <Power> Today",
        author="Ada",
        content="word " * 450,
        url="https://example.com/solar",
    )
    return EnhancedContent(
        original=original,
        enhanced=ENHANCED,
        action=Action.SUMMARIZE,
        model=ModelId.GEMINI_2_0_FLASH_EXP,
        citations=[
            Citation(id="cite-1", title="Solar <Power> Today", url="https://example.com/solar"),
        ],
        table_of_contents=build_outline(ENHANCED),
    )


# ─── Utils ───


def test_reading_time():
    assert estimate_reading_time("") == 0
    assert estimate_reading_time("word " * 200) == 1
    assert estimate_reading_time("word " * 201) == 2
    assert estimate_reading_time("word " * 400) == 2


def test_filenames():
    assert sanitize_filename("Hello, World!") == "hello-world"
    assert sanitize_filename("My Article! 2024") == "my-article-2024"
    assert sanitize_filename("  --Ünïcode--  ") == "n-code"
    assert document_filename("My Article") == "my-article-enhanced.pdf"
    assert document_filename("!!!") == "enhanced.pdf"


# ─── Markdown ───


def test_markdown_headings_get_outline_ids():
    html = markdown_to_html(ENHANCED)
    assert '<h1 id="heading-1">Summary</h1>' in html
    assert '<h2 id="heading-2">Details</h2>' in html
    assert "<strong>main</strong>" in html
    assert "<em>clear</em>" in html
    assert "<ul><li>first</li><li>second</li></ul>" in html
    assert "<ol><li>one</li><li>two</li></ol>" in html


def test_markdown_ids_match_outline_ids():
    text = "# A\ntext\n## B\n### C\n# D"
    ids = re.findall(r'id="([^"]+)"', markdown_to_html(text))
    assert ids == [item.id for _, item in iter_outline(build_outline(text))]
    assert ids == ["heading-1", "heading-2", "heading-3", "heading-4"]


def test_markdown_paragraph_lines_join_with_break():
    assert markdown_to_html("line one\nline two\n\nnext") == (
        "<p>line one<br>line two</p>\n<p>next</p>"
    )


def test_inline_escapes_and_neutralizes_script_links():
    assert render_inline("<b>x</b>") == "&lt;b&gt;x&lt;/b&gt;"
    assert render_inline("[site](https://a.test)") == '<a href="https://a.test">site</a>'
    assert render_inline("[bad](javascript:void)") == "bad"


def test_inline_keeps_emphasis_markers_in_href():
    assert render_inline("[x](https://a.test/*a*b*)") == '<a href="https://a.test/*a*b*">x</a>'
    assert render_inline("[x](https://a.test/**a**)") == '<a href="https://a.test/**a**">x</a>'
    assert render_inline("**see [*docs*](https://a.test/p_*q*)**") == (
        '<strong>see <a href="https://a.test/p_*q*"><em>docs</em></a></strong>'
    )


def test_text_to_paragraphs():
    assert text_to_paragraphs("a & b\n\n  c  ") == "<p>a &amp; b</p>\n<p>c</p>"


# ─── Assembly ───


def test_sections_appear_in_fixed_order(enhanced):
    html = assemble_html(
        enhanced,
        RenderOptions(include_original=True),
        generated_on=date(2024, 5, 1),
    )
    positions = [
        html.index(marker)
        for marker in (
            'class="cover-page"',
            'class="toc"',
            'class="main-content"',
            'class="original-content"',
            'class="citations"',
        )
    ]
    assert positions == sorted(positions)


def test_cover_metadata(enhanced):
    html = assemble_html(enhanced, generated_on=date(2024, 5, 1))
    assert "Solar &lt;Power&gt; Today" in html
    assert "<p class=\"cover-author\">By Ada</p>" in html
    assert "GEMINI-2.0-FLASH-EXP (summarize)" in html
    assert "2024-05-01" in html
    assert '<a href="https://example.com/solar">' in html
    assert "<Power>" not in html


def test_optional_sections_can_be_disabled(enhanced):
    html = assemble_html(
        enhanced,
        RenderOptions(include_table_of_contents=False, include_citations=False),
    )
    assert 'class="toc"' not in html
    assert 'class="citations"' not in html
    assert 'class="original-content"' not in html
    assert 'class="main-content"' in html


def test_empty_outline_omits_toc(enhanced):
    bare = enhanced.model_copy(update={"table_of_contents": None, "citations": None})
    html = assemble_html(bare)
    assert 'class="toc"' not in html
    assert 'class="citations"' not in html


def test_original_appendix_has_reading_time(enhanced):
    html = assemble_html(enhanced, RenderOptions(include_original=True))
    assert "Estimated reading time: 3 minutes" in html
    assert 'class="page-break"' in html


def test_citation_entries_are_numbered(enhanced):
    html = assemble_html(enhanced)
    assert "Citations &amp; References" in html
    assert "[1] Solar &lt;Power&gt; Today" in html


def test_toc_links_resolve_to_body_ids(enhanced):
    html = assemble_html(enhanced)
    links = set(re.findall(r'href="#([^"]+)"', html))
    ids = set(re.findall(r'id="([^"]+)"', html))
    assert links
    assert links <= ids


# ─── Renderer ───


def test_page_options_follow_settings():
    renderer = PlaywrightPdfRenderer(RenderSettings(_env_file=None, format="Letter"))
    opts = renderer.page_options("A <b> title")

    assert opts["format"] == "Letter"
    assert opts["print_background"] is True
    assert opts["margin"] == {"top": "1in", "bottom": "1in", "left": "0.8in", "right": "0.8in"}
    assert "A &lt;b&gt; title" in opts["header_template"]
    assert 'class="pageNumber"' in opts["footer_template"]
