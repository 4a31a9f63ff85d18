"""
Character Variety
==================

Counts how many of four character classes a password uses: lowercase
ASCII letters, uppercase ASCII letters, ASCII digits, and everything else
(symbols, punctuation, whitespace, non-ASCII). Each class counts once.
"""

from __future__ import annotations

import re


_CHARACTER_CLASSES: tuple[re.Pattern[str], ...] = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[^a-zA-Z0-9]"),
)

_VARIETY_LABELS: dict[int, str] = {
    1: "just one type",
    2: "two types",
    3: "three types",
    4: "four types",
}


def character_variety(password: str) -> int:
    """Return the number of character classes present in *password* (0-4)."""
    return sum(1 for pattern in _CHARACTER_CLASSES if pattern.search(password))


def variety_label(variety: int) -> str:
    """Describe a variety count; out-of-range values read as no variety."""
    return _VARIETY_LABELS.get(variety, "no variety yet")
