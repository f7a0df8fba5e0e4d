"""Utilities for parsing LLM responses and reading JSON payloads."""

import json
from pathlib import Path
from typing import Any, List


def strip_markdown_code_block(text: str) -> str:
    """Strip markdown code blocks (```json ... ```) from LLM responses."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        # Remove first line (```json) and last line (```)
        if lines[-1].strip() == "```":
            lines = lines[1:-1]
        else:
            lines = lines[1:]
        text = "\n".join(lines)
    return text


def split_comma_list(text: str) -> List[str]:
    """Split a comma-separated LLM answer into trimmed, non-empty items."""
    if not text:
        return []
    text = strip_markdown_code_block(text)
    return [item.strip() for item in text.split(",") if item.strip()]


def read_json_object(path: Path) -> dict:
    """Read a JSON object from disk. Raises on missing, unreadable or non-object payloads."""
    with open(path, "r", encoding="utf-8") as f:
        data: Any = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data
