"""Prompt composition for enhancement actions."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from pdf_enhancer.domain.schemas import Action, ExtractedContent

# Prompt template directory
PROMPT_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class ComposedPrompt:
    """System framing plus the action-specific user prompt."""

    system: str
    user: str

    @property
    def text(self) -> str:
        """The whole instruction block as a single string."""
        return f"{self.system}\n\n{self.user}"


@lru_cache
def load_prompt(name: str = "enhance", version: str = "v1") -> dict[str, Any]:
    """Load prompt templates from YAML file."""
    path = PROMPT_DIR / f"{name}_{version}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return {
        "system": data.get("system", "").strip(),
        "actions": {k: v.strip() for k, v in (data.get("actions") or {}).items()},
        "content": data.get("content", ""),
    }


def compose_prompt(
    content: ExtractedContent,
    action: Action | str,
    *,
    version: str = "v1",
) -> ComposedPrompt:
    """Build the exact instruction sent to the model.

    The full content is embedded; no truncation happens here.
    """
    templates = load_prompt("enhance", version)
    action = Action(action)
    instruction = templates["actions"][action.value]
    base_info = templates["content"].format(
        title=content.title,
        author=content.author or "Unknown",
        content=content.content,
    )
    return ComposedPrompt(
        system=templates["system"],
        user=f"{instruction}\n\n{base_info}",
    )


__all__ = ["ComposedPrompt", "compose_prompt", "load_prompt", "PROMPT_DIR"]
