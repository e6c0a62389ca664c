"""Edit-distance scoring using RapidFuzz.

Levenshtein distance plus the adaptive-threshold helpers used to turn a
distance into a 0-100 confidence. Inputs are lowercased by every helper
except ``levenshtein_distance`` itself, which is case-sensitive.
"""

import math

from rapidfuzz.distance import Levenshtein

from inventory_assistant.matching.schemas import BestMatch, MatchResult, MatchType

# Allowed edits scale with input length: 30%, never more than 3
MAX_EDITS = 3
EDIT_RATIO = 0.3


def round_half_up(value: float) -> int:
    """Round .5 towards positive infinity, as the UI scores are calibrated."""
    return math.floor(value + 0.5)


def clamp_confidence(value: int) -> int:
    """Clamp a computed confidence into 0-100."""
    return max(0, min(100, value))


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum single-character insertions, deletions and substitutions.

    Case-sensitive. ``None`` is treated as an empty string.
    """
    return Levenshtein.distance(a or "", b or "")


def adaptive_threshold(text: str) -> int:
    """Maximum edit distance tolerated for an input of this length."""
    return min(MAX_EDITS, math.ceil(len(text or "") * EDIT_RATIO))


def distance_confidence(distance: int, threshold: int) -> int:
    """Convert an edit distance into a confidence against a threshold.

    An empty input has threshold 0: only an exact hit scores.
    """
    if threshold == 0:
        return 100 if distance == 0 else 0
    return clamp_confidence(round_half_up((1 - distance / threshold) * 100))


def fuzzy_match(input: str, target: str, threshold: int = 2) -> bool:
    """Check whether two strings are within ``threshold`` edits (case-insensitive)."""
    distance = levenshtein_distance((input or "").lower(), (target or "").lower())
    return distance <= threshold


def find_best_match(input: str, options: list[str]) -> BestMatch:
    """Find the closest option within the adaptive threshold.

    Ties keep the first option seen.

    Args:
        input: User-typed value
        options: Candidate universe

    Returns:
        BestMatch with the winning option, or match=None and confidence 0
    """
    input_lower = (input or "").lower()
    threshold = adaptive_threshold(input_lower)

    best: str | None = None
    lowest = math.inf
    for option in options:
        distance = levenshtein_distance(input_lower, (option or "").lower())
        if distance < lowest and distance <= threshold:
            lowest = distance
            best = option

    if best is None:
        return BestMatch()
    return BestMatch(match=best, confidence=distance_confidence(lowest, threshold))


def find_all_matches(
    input: str,
    options: list[str],
    min_confidence: int = 60,
) -> list[MatchResult]:
    """Find every option scoring at least ``min_confidence``.

    Returns:
        Matches sorted by confidence descending; equal scores keep input order
    """
    input_lower = (input or "").lower()
    threshold = adaptive_threshold(input_lower)

    matches: list[MatchResult] = []
    for option in options:
        distance = levenshtein_distance(input_lower, (option or "").lower())
        if distance > threshold:
            continue
        confidence = distance_confidence(distance, threshold)
        if confidence >= min_confidence:
            matches.append(
                MatchResult(
                    match=option, confidence=confidence, match_type=MatchType.FUZZY
                )
            )

    return sorted(matches, key=lambda m: m.confidence, reverse=True)


def highlight_differences(input: str, match: str) -> str:
    """Annotate a corrected value with what the user originally typed."""
    if (input or "").lower() == (match or "").lower():
        return match
    return f'{match} (corrected from "{input}")'
