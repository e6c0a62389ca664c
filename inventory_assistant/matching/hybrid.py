"""Hybrid matching combining exact, substring, phonetic and edit-distance signals.

Each option is run through an ordered chain of strategies; the first one
that recognizes the option decides its score and match type:

1. Exact (case-insensitive) -> 100
2. Substring either direction -> up to 90, scaled by length ratio
3. Soundex equality -> 85
4. Edit distance within the adaptive threshold -> distance confidence
"""

from collections.abc import Callable

from inventory_assistant.matching.edit_distance import (
    adaptive_threshold,
    distance_confidence,
    levenshtein_distance,
    round_half_up,
)
from inventory_assistant.matching.phonetic import sounds_like
from inventory_assistant.matching.schemas import MatchResult, MatchType

CONTAINS_MAX_CONFIDENCE = 90
PHONETIC_CONFIDENCE = 85

MatchStrategy = Callable[[str, str, int], MatchResult | None]


def exact_strategy(input: str, option: str, min_confidence: int) -> MatchResult | None:
    """Case-insensitive equality."""
    if input.lower() == option.lower():
        return MatchResult(match=option, confidence=100, match_type=MatchType.EXACT)
    return None


def contains_strategy(
    input: str, option: str, min_confidence: int
) -> MatchResult | None:
    """Substring containment in either direction, scored by length ratio.

    Not gated by ``min_confidence``: a short fragment of a long name is
    reported with its low score.
    """
    input_lower = input.lower()
    option_lower = option.lower()
    if input_lower not in option_lower and option_lower not in input_lower:
        return None

    longest = max(len(input), len(option))
    ratio = min(len(input), len(option)) / longest if longest else 1.0
    return MatchResult(
        match=option,
        confidence=round_half_up(ratio * CONTAINS_MAX_CONFIDENCE),
        match_type=MatchType.FUZZY,
    )


def phonetic_strategy(
    input: str, option: str, min_confidence: int
) -> MatchResult | None:
    """Soundex equality at a fixed confidence."""
    if sounds_like(input, option):
        return MatchResult(
            match=option,
            confidence=PHONETIC_CONFIDENCE,
            match_type=MatchType.PHONETIC,
        )
    return None


def edit_distance_strategy(
    input: str, option: str, min_confidence: int
) -> MatchResult | None:
    """Levenshtein distance within the adaptive threshold."""
    threshold = adaptive_threshold(input)
    distance = levenshtein_distance(input.lower(), option.lower())
    if distance > threshold:
        return None

    confidence = distance_confidence(distance, threshold)
    if confidence < min_confidence:
        return None
    return MatchResult(match=option, confidence=confidence, match_type=MatchType.FUZZY)


MATCH_STRATEGIES: tuple[MatchStrategy, ...] = (
    exact_strategy,
    contains_strategy,
    phonetic_strategy,
    edit_distance_strategy,
)


def match_option(input: str, option: str, min_confidence: int = 60) -> MatchResult | None:
    """Score one option with the first strategy that recognizes it."""
    for strategy in MATCH_STRATEGIES:
        result = strategy(input, option, min_confidence)
        if result is not None:
            return result
    return None


def hybrid_match(
    input: str,
    options: list[str],
    min_confidence: int = 60,
) -> list[MatchResult]:
    """Rank options against the input using every matching signal.

    Each option appears at most once; options no strategy recognizes are
    left out rather than reported with confidence 0.

    Args:
        input: User-typed value
        options: Candidate universe
        min_confidence: Minimum confidence for edit-distance matches

    Returns:
        Matches sorted by confidence descending; equal scores keep input order
    """
    input = input or ""
    results: list[MatchResult] = []
    for option in options:
        result = match_option(input, option or "", min_confidence)
        if result is not None:
            results.append(result)

    return sorted(results, key=lambda r: r.confidence, reverse=True)
