"""Fuzzy matching for assistant query filters.

This module provides:
- Edit-distance scoring (RapidFuzz Levenshtein with adaptive thresholds)
- Phonetic coding (Soundex variant)
- Bengali name-variant normalization
- Hybrid ranked matching (exact -> contains -> phonetic -> edit distance)
- FuzzyResolver: rewrites username/department filter values and records
  corrections for the UI
"""

from inventory_assistant.matching.edit_distance import (
    find_all_matches,
    find_best_match,
    fuzzy_match,
    highlight_differences,
    levenshtein_distance,
)
from inventory_assistant.matching.hybrid import hybrid_match
from inventory_assistant.matching.name_variants import (
    are_bengali_names_equivalent,
    get_bengali_name_variations,
    normalize_bengali_name,
    search_with_bengali_variations,
)
from inventory_assistant.matching.phonetic import soundex, sounds_like
from inventory_assistant.matching.resolver import CandidateSource, FuzzyResolver
from inventory_assistant.matching.schemas import (
    BestMatch,
    CorrectionMethod,
    FuzzyCorrection,
    MatchResult,
    MatchType,
    QueryFilter,
    SimilarCandidate,
)

__all__ = [
    "BestMatch",
    "CandidateSource",
    "CorrectionMethod",
    "FuzzyCorrection",
    "FuzzyResolver",
    "MatchResult",
    "MatchType",
    "QueryFilter",
    "SimilarCandidate",
    "are_bengali_names_equivalent",
    "find_all_matches",
    "find_best_match",
    "fuzzy_match",
    "get_bengali_name_variations",
    "highlight_differences",
    "hybrid_match",
    "levenshtein_distance",
    "normalize_bengali_name",
    "search_with_bengali_variations",
    "soundex",
    "sounds_like",
]
