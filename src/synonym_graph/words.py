"""Word identity helpers for synonym-graph."""

from __future__ import annotations

from typing import Any


def canonical(word: str) -> str:
    """Return the case-insensitive identity of *word*."""
    return word.casefold()


def is_blank(value: Any) -> bool:
    """Check if *value* is not a string, or is empty or all-whitespace."""
    return not isinstance(value, str) or not value.strip()
