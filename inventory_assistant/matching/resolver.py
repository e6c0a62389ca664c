"""FuzzyResolver rewrites query filter values to known inventory values.

Resolution pipeline for ``username`` (first tier that succeeds wins):
1. Database trigram similarity (top candidate at or above the accept bar)
2. Exact case-insensitive match against all known usernames
3. Bengali name-variant match
4. Hybrid match (exact / contains / phonetic / edit distance)

``department`` only uses the database similarity tier.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import structlog

from inventory_assistant.matching.edit_distance import clamp_confidence, round_half_up
from inventory_assistant.matching.hybrid import hybrid_match
from inventory_assistant.matching.name_variants import search_with_bengali_variations
from inventory_assistant.matching.schemas import (
    CorrectionMethod,
    FuzzyCorrection,
    QueryFilter,
    SimilarCandidate,
)

logger = structlog.get_logger()


@runtime_checkable
class CandidateSource(Protocol):
    """Storage collaborator supplying candidate values per filter field."""

    async def fetch_similar_candidates(
        self, field: str, value: str, candidates: list[str] | None = None
    ) -> list[SimilarCandidate]:
        """Top candidates by trigram similarity, best first.

        Scores ``candidates`` when given instead of reading storage again.
        """
        ...

    async def fetch_all_candidates(self, field: str) -> list[str]:
        """Every distinct stored value for the field."""
        ...


@dataclass
class Resolution:
    """Outcome of a resolver tier that recognized the value."""

    corrected: str
    confidence: int
    method: str


class _FieldContext:
    """Per-field state shared by the tiers of one resolution.

    The candidate universe is fetched at most once, so every tier sees the
    same snapshot.
    """

    def __init__(self, source: CandidateSource, field: str, value: str):
        self.source = source
        self.field = field
        self.value = value
        self._universe: list[str] | None = None

    async def universe(self) -> list[str]:
        if self._universe is None:
            self._universe = await self.source.fetch_all_candidates(self.field)
        return self._universe


Tier = Callable[[_FieldContext], Awaitable[Resolution | None]]


class FuzzyResolver:
    """Resolves user-typed filter values against the live candidate universe.

    Corrections are only recorded when a value is actually rewritten; an
    input that already matches a stored value exactly is left alone.
    """

    def __init__(
        self,
        candidate_source: CandidateSource,
        accept_threshold: int = 60,
        locale_confidence: int = 95,
        hybrid_min_confidence: int = 60,
    ):
        """Initialize resolver with its storage collaborator.

        Args:
            candidate_source: Supplier of similar and all candidates per field
            accept_threshold: Minimum similarity confidence (0-100) to accept
                a database match
            locale_confidence: Confidence assigned to name-variant matches
            hybrid_min_confidence: Minimum confidence for hybrid matches
        """
        self._source = candidate_source
        self._accept_threshold = accept_threshold
        self._locale_confidence = locale_confidence
        self._hybrid_min_confidence = hybrid_min_confidence
        self._tiers: dict[str, tuple[Tier, ...]] = {
            "username": (
                self._similarity_tier,
                self._exact_tier,
                self._locale_tier,
                self._hybrid_tier,
            ),
            "department": (self._similarity_tier,),
        }

    @property
    def fields(self) -> tuple[str, ...]:
        """Filter fields this resolver corrects."""
        return tuple(self._tiers)

    async def resolve_filters(
        self, filters: dict[str, QueryFilter]
    ) -> list[FuzzyCorrection]:
        """Resolve every supported filter, rewriting values in place.

        Fields are resolved independently, in the order of ``fields``.
        Candidate fetch errors propagate; callers treat them as "unresolved".

        Args:
            filters: Structured filters keyed by field name

        Returns:
            Corrections applied, one per rewritten field
        """
        corrections: list[FuzzyCorrection] = []
        for field in self.fields:
            query_filter = filters.get(field)
            if query_filter is None:
                continue
            correction = await self.resolve_field(field, query_filter)
            if correction:
                corrections.append(correction)
        return corrections

    async def resolve_field(
        self, field: str, query_filter: QueryFilter
    ) -> FuzzyCorrection | None:
        """Resolve a single filter value.

        Args:
            field: Filter field name
            query_filter: Filter whose value may be rewritten

        Returns:
            The correction applied, or None if the value was left unchanged
        """
        tiers = self._tiers.get(field)
        original = query_filter.value
        if not tiers or not original:
            return None

        context = _FieldContext(self._source, field, original)
        for tier in tiers:
            resolution = await tier(context)
            if resolution is None:
                continue
            if resolution.corrected == original:
                # Already an exact stored value
                return None

            query_filter.value = resolution.corrected
            correction = FuzzyCorrection(
                field=field,
                original=original,
                corrected=resolution.corrected,
                confidence=resolution.confidence,
                method=resolution.method,
            )
            logger.info(
                "filter value corrected",
                field=field,
                original=original,
                corrected=resolution.corrected,
                confidence=resolution.confidence,
                method=resolution.method,
            )
            return correction

        logger.debug("no fuzzy match", field=field, value=original)
        return None

    async def _similarity_tier(self, context: _FieldContext) -> Resolution | None:
        """Accept the storage layer's top trigram candidate if it clears the bar."""
        similar = await self._source.fetch_similar_candidates(
            context.field, context.value, await context.universe()
        )
        if not similar:
            return None

        # An input stored verbatim wins any tie for the top score
        top = similar[0].similarity
        best = next(
            (
                c
                for c in similar
                if c.similarity == top and c.candidate == context.value
            ),
            similar[0],
        )
        confidence = clamp_confidence(round_half_up(best.similarity * 100))
        if confidence < self._accept_threshold:
            logger.debug(
                "trigram candidate below accept threshold",
                field=context.field,
                candidate=best.candidate,
                confidence=confidence,
            )
            return None
        return Resolution(
            corrected=best.candidate,
            confidence=confidence,
            method=CorrectionMethod.DATABASE_TRIGRAM.value,
        )

    async def _exact_tier(self, context: _FieldContext) -> Resolution | None:
        """Case-insensitive equality; identical values stop the pipeline."""
        value_lower = context.value.lower()
        for candidate in await context.universe():
            if candidate.lower() == value_lower:
                return Resolution(
                    corrected=candidate,
                    confidence=100,
                    method=CorrectionMethod.EXACT_CASE_FIX.value,
                )
        return None

    async def _locale_tier(self, context: _FieldContext) -> Resolution | None:
        """First candidate equivalent under Bengali name normalization."""
        matches = search_with_bengali_variations(
            context.value, await context.universe()
        )
        if not matches:
            return None
        return Resolution(
            corrected=matches[0],
            confidence=self._locale_confidence,
            method=CorrectionMethod.BENGALI_NORMALIZATION.value,
        )

    async def _hybrid_tier(self, context: _FieldContext) -> Resolution | None:
        """Top hybrid match, if it clears the minimum confidence."""
        results = hybrid_match(
            context.value, await context.universe(), self._hybrid_min_confidence
        )
        if not results or results[0].confidence < self._hybrid_min_confidence:
            return None
        best = results[0]
        return Resolution(
            corrected=best.match,
            confidence=best.confidence,
            method=best.match_type.value,
        )
