"""Fuzzy matching schemas.

Defines match results, query filters and the correction records the
resolver hands back to the UI.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MatchType(str, Enum):
    """How a candidate matched the input."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    PHONETIC = "phonetic"
    CONTAINS = "contains"


class CorrectionMethod(str, Enum):
    """Resolver tiers that can rewrite a filter value.

    The hybrid tier reports its MatchType value instead of one of these.
    """

    DATABASE_TRIGRAM = "database_trigram"
    EXACT_CASE_FIX = "exact_case_fix"
    BENGALI_NORMALIZATION = "bengali_normalization"


METHOD_LABELS: dict[str, str] = {
    CorrectionMethod.EXACT_CASE_FIX.value: "Case Fix",
    CorrectionMethod.DATABASE_TRIGRAM.value: "Fuzzy Match",
    CorrectionMethod.BENGALI_NORMALIZATION.value: "Bengali Name",
    MatchType.PHONETIC.value: "Sounds Like",
    MatchType.FUZZY.value: "Similar",
    MatchType.CONTAINS.value: "Partial Match",
}


class MatchResult(BaseModel):
    """A single ranked match from a candidate list."""

    match: str = Field(description="Matched candidate, original casing")
    confidence: int = Field(ge=0, le=100, description="Match confidence (0-100)")
    match_type: MatchType = Field(description="How the match was determined")


class BestMatch(BaseModel):
    """Best edit-distance match, or no match with confidence 0."""

    match: str | None = Field(default=None, description="Closest candidate")
    confidence: int = Field(default=0, ge=0, le=100, description="Confidence (0-100)")


class SimilarCandidate(BaseModel):
    """Candidate returned by the storage similarity search."""

    candidate: str = Field(description="Stored value")
    similarity: float = Field(ge=0.0, le=1.0, description="Trigram similarity (0-1)")


class QueryFilter(BaseModel):
    """One structured filter produced by the intent classifier.

    The resolver rewrites ``value`` in place when it corrects it.
    """

    operator: str = Field(default="equals", description="Comparison operator")
    value: str = Field(description="User-typed filter value")


class FuzzyCorrection(BaseModel):
    """Record of a filter value the resolver rewrote.

    Lives for one query/response cycle; the UI renders it as an
    "auto-corrected" badge.
    """

    field: str = Field(description="Filter field that was corrected")
    original: str = Field(description="Value as typed by the user")
    corrected: str = Field(description="Candidate the value was rewritten to")
    confidence: int = Field(ge=0, le=100, description="Correction confidence (0-100)")
    method: str = Field(description="Resolver tier or match type that produced it")

    @property
    def label(self) -> str:
        """Display name for the correction method."""
        return METHOD_LABELS.get(self.method, "Auto-correct")

    def describe(self) -> str:
        """Interpretation suffix shown next to the query."""
        return (
            f'corrected "{self.original}" to "{self.corrected}" using {self.method}'
        )
