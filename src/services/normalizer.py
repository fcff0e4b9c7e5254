"""Query normalization shared by every matching stage."""

from typing import List

SIGNIFICANT_WORD_MIN_LENGTH = 4


def normalize(raw: str) -> str:
    """Trim and lowercase; punctuation is kept so "no?" and "no" stay distinct."""
    return raw.strip().lower()


def significant_words(query: str) -> List[str]:
    """
    Whitespace tokens longer than three characters, deduplicated in order.

    Short tokens are treated as stop-words without consulting a list.
    """
    words = (
        token.lower()
        for token in query.split()
        if len(token) >= SIGNIFICANT_WORD_MIN_LENGTH
    )
    return list(dict.fromkeys(words))
