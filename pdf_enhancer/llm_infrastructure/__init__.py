"""LLM-facing building blocks: provider clients and enhancement helpers."""
