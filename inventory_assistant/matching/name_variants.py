"""Bengali name normalization.

Maps common English transliterations of Bengali/South-Asian personal names
to one canonical spelling ("Muhammad" -> "mohammad", "Hossein" ->
"hossain") and enumerates the known spellings of a name.

Both tables are built once at import and never mutated afterwards.
"""

from itertools import product
from types import MappingProxyType

# canonical -> known spellings, canonical included
_VARIATIONS: dict[str, tuple[str, ...]] = {
    "mohammad": ("muhammad", "mohammed", "muhammed", "mohamed", "mohammad"),
    "hossain": ("hossein", "husain", "hussain", "hossain", "hosen"),
    # each spelling once, so "Rahman" expands to two variations, not three
    "rahman": ("rahaman", "rahman"),
    "karim": ("kareem", "karem", "karim"),
    "ahmed": ("ahmad", "ahmmed", "ahamed", "ahmed"),
    "abdul": ("abdal", "abdool", "abdul"),
    "islam": ("eslam", "islam"),
    "alam": ("aalam", "alam"),
    "kabir": ("kabeer", "kabir"),
    "rafiq": ("rafique", "rafik", "rafiq"),
    "sadiq": ("saddiq", "sadique", "sadiq"),
    "shakil": ("shakeel", "shaquil", "shakil"),
    "taslim": ("tasleem", "taslim"),
    "nasir": ("naseer", "naser", "nasir"),
}


def _build_reverse_index(
    variations: dict[str, tuple[str, ...]],
) -> dict[str, str]:
    """Map every spelling to its canonical key (last write wins)."""
    index: dict[str, str] = {}
    for canonical, spellings in variations.items():
        for spelling in spellings:
            index[spelling.lower()] = canonical
    return index


NAME_VARIATIONS = MappingProxyType(_VARIATIONS)
VARIATION_TO_CANONICAL = MappingProxyType(_build_reverse_index(_VARIATIONS))


def _words(name: str) -> list[str]:
    return (name or "").lower().split()


def canonical_name_for(word: str) -> str | None:
    """Canonical spelling for a single name word, if known."""
    return VARIATION_TO_CANONICAL.get((word or "").strip().lower())


def normalize_bengali_name(name: str) -> str:
    """Lowercase a name and replace each word with its canonical spelling.

    Unknown words are kept as-is; words are rejoined with single spaces.
    """
    return " ".join(canonical_name_for(word) or word for word in _words(name))


def are_bengali_names_equivalent(a: str, b: str) -> bool:
    """Check if two names normalize to the same string (word order matters)."""
    return normalize_bengali_name(a) == normalize_bengali_name(b)


def get_bengali_name_variations(name: str) -> list[str]:
    """Enumerate every known spelling combination of a name.

    Returns the Cartesian product of each word's variants, title-cased per
    word. The result is not capped: it grows with the product of the
    variant counts.
    """
    per_word: list[tuple[str, ...]] = []
    for word in _words(name):
        canonical = canonical_name_for(word)
        per_word.append(NAME_VARIATIONS[canonical] if canonical else (word,))

    return [
        " ".join(word[:1].upper() + word[1:] for word in combo)
        for combo in product(*per_word)
    ]


def search_with_bengali_variations(search_term: str, names: list[str]) -> list[str]:
    """Find names equivalent to the search term or sharing a whole word with it.

    Both sides are normalized first, so "Muhammad" finds "Mohammed Ali".

    Args:
        search_term: Name typed by the user
        names: Candidate names

    Returns:
        Matching names in their original order and casing
    """
    normalized_search = normalize_bengali_name(search_term)
    search_words = set(normalized_search.split())

    matches: list[str] = []
    for name in names:
        normalized_name = normalize_bengali_name(name)
        if normalized_name == normalized_search or search_words.intersection(
            normalized_name.split()
        ):
            matches.append(name)
    return matches
