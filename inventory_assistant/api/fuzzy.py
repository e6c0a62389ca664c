"""Fuzzy matching API endpoints.

Resolves assistant query filters against known inventory values and
exposes the matching helpers to autocomplete tooling.
"""

import structlog
from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from inventory_assistant.matching.hybrid import hybrid_match
from inventory_assistant.matching.name_variants import (
    get_bengali_name_variations,
    normalize_bengali_name,
)
from inventory_assistant.matching.resolver import FuzzyResolver
from inventory_assistant.matching.schemas import (
    FuzzyCorrection,
    MatchResult,
    QueryFilter,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/fuzzy", tags=["fuzzy"])


class ResolveRequest(BaseModel):
    """Filters extracted from a natural-language query."""

    filters: dict[str, QueryFilter] = Field(
        default_factory=dict, description="Structured filters keyed by field"
    )


class CorrectionResponse(BaseModel):
    """Single applied correction for the UI badge."""

    field: str
    original: str
    corrected: str
    confidence: int = Field(ge=0, le=100)
    method: str
    label: str = Field(description="Display name of the correction method")

    @classmethod
    def from_correction(cls, correction: FuzzyCorrection) -> "CorrectionResponse":
        """Convert internal FuzzyCorrection to API response model."""
        return cls(
            field=correction.field,
            original=correction.original,
            corrected=correction.corrected,
            confidence=correction.confidence,
            method=correction.method,
            label=correction.label,
        )


class ResolveResponse(BaseModel):
    """Filters after resolution plus the corrections applied."""

    filters: dict[str, QueryFilter]
    corrections: list[CorrectionResponse] = Field(default_factory=list)
    resolution_failed: bool = Field(
        default=False,
        description="True if candidates could not be loaded; filters are unchanged",
    )
    interpretation: str | None = Field(
        default=None, description="Human-readable summary of corrections"
    )


class MatchRequest(BaseModel):
    """Rank candidate options against a typed value."""

    input: str = Field(description="Typed value")
    options: list[str] = Field(default_factory=list, description="Candidates")
    min_confidence: int = Field(default=60, ge=0, le=100)


class VariationsResponse(BaseModel):
    """Known spellings of a name."""

    name: str
    normalized: str
    variations: list[str]


def get_fuzzy_resolver(request: Request) -> FuzzyResolver:
    """Dependency to get FuzzyResolver from app state."""
    return request.app.state.fuzzy_resolver


def _interpretation(corrections: list[FuzzyCorrection]) -> str | None:
    if not corrections:
        return None
    return "; ".join(c.describe() for c in corrections)


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_filters(
    request: ResolveRequest,
    resolver: FuzzyResolver = Depends(get_fuzzy_resolver),
) -> ResolveResponse:
    """Auto-correct username and department filter values.

    Fuzzy resolution is best-effort: if candidate values cannot be loaded,
    the original filters are returned untouched with no corrections.

    Args:
        request: Filters from the intent classifier
        resolver: Fuzzy resolution service

    Returns:
        ResolveResponse with (possibly rewritten) filters and corrections
    """
    filters = {
        field: query_filter.model_copy()
        for field, query_filter in request.filters.items()
    }
    try:
        corrections = await resolver.resolve_filters(filters)
    except Exception as e:
        logger.warning(
            "fuzzy resolution failed, using original filters",
            fields=sorted(request.filters),
            error=str(e),
        )
        return ResolveResponse(filters=request.filters, resolution_failed=True)

    return ResolveResponse(
        filters=filters,
        corrections=[CorrectionResponse.from_correction(c) for c in corrections],
        interpretation=_interpretation(corrections),
    )


@router.post("/match", response_model=list[MatchResult])
async def match_options(request: MatchRequest) -> list[MatchResult]:
    """Rank options with the hybrid matcher (autocomplete suggestions)."""
    return hybrid_match(request.input, request.options, request.min_confidence)


@router.get("/variations", response_model=VariationsResponse)
async def name_variations(
    name: str = Query(min_length=1, description="Name to expand"),
) -> VariationsResponse:
    """List the known transliteration variants of a name."""
    return VariationsResponse(
        name=name,
        normalized=normalize_bengali_name(name),
        variations=get_bengali_name_variations(name),
    )
