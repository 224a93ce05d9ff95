from __future__ import annotations

import math

DEFAULT_TOKENS_PER_WORD = 1.3


def count_words(text: str) -> int:
    """Count whitespace-separated words; empty or blank text has zero."""
    return len(text.split())


def estimate_tokens(text: str, tokens_per_word: float = DEFAULT_TOKENS_PER_WORD) -> int:
    """Rough token estimate: ceil(words * ratio), never below 1."""
    return max(1, math.ceil(count_words(text) * tokens_per_word))
