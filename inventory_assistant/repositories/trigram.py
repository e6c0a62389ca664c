"""Trigram similarity with PostgreSQL pg_trgm semantics.

- Text is lowercased and split into words of alphanumeric characters.
- Each word is padded with two leading spaces and one trailing space
  before its character trigrams are taken.
- Similarity is shared trigrams over the union of both trigram sets (0-1).
"""

import re

_WORD = re.compile(r"[^\W_]+")


def trigrams(text: str) -> set[str]:
    """Unique padded trigrams of every word in text."""
    grams: set[str] = set()
    for word in _WORD.findall((text or "").lower()):
        padded = f"  {word} "
        grams.update(padded[i : i + 3] for i in range(len(padded) - 2))
    return grams


def trigram_similarity(a: str, b: str) -> float:
    """Similarity of two strings as the pg_trgm ``similarity()`` function computes it."""
    grams_a = trigrams(a)
    grams_b = trigrams(b)
    if not grams_a or not grams_b:
        return 0.0
    shared = len(grams_a & grams_b)
    return shared / (len(grams_a) + len(grams_b) - shared)
