"""Prompt composition tests."""

from __future__ import annotations

import pytest

from pdf_enhancer.domain.schemas import Action, ExtractedContent
from pdf_enhancer.llm_infrastructure.enhancement.prompts import compose_prompt, load_prompt


@pytest.fixture
def content():
    return ExtractedContent(
        title="Tidal Energy",
        author="J. Doe",
        content="Tidal turbines convert the kinetic energy of moving water into power.",
    )


def test_load_prompt_has_all_actions():
    templates = load_prompt("enhance", "v1")
    assert set(templates["actions"]) == {"summarize", "expand", "validate"}
    assert templates["system"].startswith("You are an expert content analyst")


def test_load_prompt_missing_version():
    with pytest.raises(FileNotFoundError):
        load_prompt("enhance", "v999")


def test_compose_summarize(content):
    prompt = compose_prompt(content, Action.SUMMARIZE)
    assert prompt.user.startswith("Please provide a comprehensive summary")
    assert "Title: Tidal Energy\nAuthor: J. Doe\nContent: Tidal turbines" in prompt.user
    assert prompt.text == f"{prompt.system}\n\n{prompt.user}"


def test_compose_validate_lists_report_items(content):
    prompt = compose_prompt(content, "validate")
    assert "validation report" in prompt.user
    for n in range(1, 5):
        assert f"\n{n}. " in prompt.user


def test_compose_expand_mentions_examples(content):
    assert "examples" in compose_prompt(content, Action.EXPAND).user


def test_missing_author_is_unknown():
    content = ExtractedContent(title="T", content="x" * 60)
    assert "Author: Unknown" in compose_prompt(content, Action.SUMMARIZE).user


def test_content_is_not_truncated(content):
    long_body = "word " * 20000
    prompt = compose_prompt(content.model_copy(update={"content": long_body}), Action.SUMMARIZE)
    assert long_body in prompt.user


def test_compose_is_deterministic(content):
    for action in Action:
        assert compose_prompt(content, action) == compose_prompt(content, action)
