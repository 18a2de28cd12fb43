"""Heading outline (table of contents) tests."""

from __future__ import annotations

from pdf_enhancer.llm_infrastructure.enhancement.outline import (
    build_outline,
    count_outline,
    iter_outline,
    match_heading,
    render_outline_html,
    scan_headings,
)


SAMPLE = """# Overview
intro text
## Background
## Scope
# Findings
### Detail
"""


def test_match_heading_requires_space_after_marks():
    assert match_heading("## Title") == (2, "Title")
    assert match_heading("##Title") is None
    assert match_heading("####### Seven") is None
    assert match_heading("   # indented") is None
    assert match_heading("#   padded   ") == (1, "padded")


def test_scan_headings_numbers_in_document_order():
    headings = scan_headings(SAMPLE)
    assert [h.id for h in headings] == [f"heading-{i}" for i in range(1, 6)]
    assert [h.level for h in headings] == [1, 2, 2, 1, 3]


def test_build_outline_nests_by_level():
    roots = build_outline(SAMPLE)

    assert [r.title for r in roots] == ["Overview", "Findings"]
    overview, findings = roots
    assert [c.title for c in overview.children] == ["Background", "Scope"]
    assert [c.id for c in overview.children] == ["heading-2", "heading-3"]
    # A skipped level still nests under the nearest shallower heading
    assert [c.title for c in findings.children] == ["Detail"]
    assert findings.children[0].level == 3
    assert overview.children[0].children == []


def test_build_outline_without_headings_is_empty():
    assert build_outline("") == []
    assert build_outline("plain text\nno headings here") == []


def test_deep_outline_is_walked_without_recursion():
    text = "\n".join("#" * (i % 6 + 1) + f" h{i}" for i in range(3000))
    roots = build_outline(text)
    assert count_outline(roots) == 3000
    depths = [depth for depth, _ in iter_outline(roots)]
    assert max(depths) == 5


def test_iter_outline_preserves_document_order():
    titles = [item.title for _, item in iter_outline(build_outline(SAMPLE))]
    assert titles == ["Overview", "Background", "Scope", "Findings", "Detail"]


def test_render_outline_html_links_anchors_and_escapes():
    html = render_outline_html(build_outline("# A & B\n## <child>"))
    assert html == (
        '<ul><li class="level-1"><a href="#heading-1">A &amp; B</a>'
        '<ul><li class="level-2"><a href="#heading-2">&lt;child&gt;</a></li></ul>'
        "</li></ul>"
    )
