"""Word count shown alongside the converted text."""

from __future__ import annotations

from typing import Literal

WordCountLevel = Literal["ok", "warning", "limit"]

DEFAULT_WARNING = 3000
DEFAULT_LIMIT = 5000


def count_words(text: str) -> int:
    """Count whitespace-separated tokens. 0 for empty input."""
    if not text:
        return 0
    return len(text.split())


def word_count_level(
    count: int,
    warning: int = DEFAULT_WARNING,
    limit: int = DEFAULT_LIMIT,
) -> WordCountLevel:
    """Classify a word count against the warning and hard thresholds."""
    if count > limit:
        return "limit"
    if count > warning:
        return "warning"
    return "ok"
