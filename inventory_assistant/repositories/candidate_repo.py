"""Repository supplying candidate values for fuzzy filter resolution.

Reads distinct usernames and departments across the inventory tables
(PCs, laptops, servers, peripheral logs). The tables themselves belong to
the CRUD layer; this repository only reads them.
"""

import logging

from inventory_assistant.db.turso import TursoClient
from inventory_assistant.matching.schemas import SimilarCandidate
from inventory_assistant.repositories.trigram import trigram_similarity

logger = logging.getLogger(__name__)

# field -> (table, column) pairs holding its values
FIELD_SOURCES: dict[str, tuple[tuple[str, str], ...]] = {
    "username": (
        ("pcs", "username"),
        ("laptops", "username"),
        ("maintenance_costs", "username"),
        ("mouseLogs", "pcUsername"),
        ("keyboardLogs", "pcUsername"),
        ("ssdLogs", "pcUsername"),
        ("headphoneLogs", "pcUsername"),
        ("portableHDDLogs", "pcUsername"),
    ),
    "department": (
        ("pcs", "department"),
        ("laptops", "department"),
        ("servers", "department"),
    ),
}


class CandidateFetchError(Exception):
    """Candidate values could not be read from the inventory database."""


def _build_distinct_query(field: str) -> str:
    """SQL selecting the distinct non-empty values of a field, sorted."""
    try:
        sources = FIELD_SOURCES[field]
    except KeyError:
        msg = f"Unsupported candidate field: {field}"
        raise ValueError(msg) from None

    selects = [
        f'SELECT "{column}" AS value FROM "{table}" '
        f'WHERE "{column}" IS NOT NULL AND TRIM("{column}") <> \'\''
        for table, column in sources
    ]
    return (
        "SELECT value FROM (\n    "
        + "\n    UNION\n    ".join(selects)
        + "\n) AS all_values\nORDER BY value"
    )


class CandidateRepository:
    """Candidate universe lookups over the inventory tables.

    Implements the CandidateSource protocol consumed by FuzzyResolver.
    Similarity uses pg_trgm semantics computed over the distinct values.
    """

    def __init__(
        self,
        db_client: TursoClient,
        similarity_floor: float = 0.3,
        limit: int = 5,
    ):
        """Initialize repository with database client.

        Args:
            db_client: TursoClient instance for database operations
            similarity_floor: Similarity a candidate must exceed (0-1)
            limit: Maximum similar candidates returned
        """
        self._db = db_client
        self._floor = similarity_floor
        self._limit = limit

    async def fetch_all_candidates(self, field: str) -> list[str]:
        """Get every distinct stored value for a field.

        Args:
            field: Filter field ("username" or "department")

        Returns:
            Distinct values sorted ascending

        Raises:
            ValueError: If the field has no known source columns
            CandidateFetchError: If the database query fails
        """
        sql = _build_distinct_query(field)
        try:
            result = await self._db.execute(sql)
        except Exception as e:
            logger.error(f"Failed to load {field} candidates: {e}")
            raise CandidateFetchError(f"Could not load {field} candidates") from e
        return [row[0] for row in result.rows]

    async def fetch_similar_candidates(
        self,
        field: str,
        value: str,
        candidates: list[str] | None = None,
    ) -> list[SimilarCandidate]:
        """Get the stored values most similar to ``value``.

        Trigram similarity ignores case and word order, so several values
        can tie; among ties the value equal to the input comes first, then
        case-insensitive equals, then the universe order.

        Args:
            field: Filter field ("username" or "department")
            value: User-typed value
            candidates: Universe snapshot already fetched for this field;
                queried from the database when omitted

        Returns:
            Up to ``limit`` candidates above the similarity floor, best first
        """
        if candidates is None:
            candidates = await self.fetch_all_candidates(field)

        scored: list[SimilarCandidate] = []
        for candidate in candidates:
            similarity = trigram_similarity(candidate, value)
            if similarity > self._floor:
                scored.append(
                    SimilarCandidate(candidate=candidate, similarity=similarity)
                )

        value_lower = value.lower()
        scored.sort(
            key=lambda c: (
                c.similarity,
                c.candidate == value,
                c.candidate.lower() == value_lower,
            ),
            reverse=True,
        )
        return scored[: self._limit]

    async def missing_tables(self) -> list[str]:
        """Inventory tables the candidate queries need but the database lacks."""
        required = sorted(
            {table for sources in FIELD_SOURCES.values() for table, _ in sources}
        )
        placeholders = ", ".join("?" for _ in required)
        result = await self._db.execute(
            "SELECT name FROM sqlite_master "
            f"WHERE type = 'table' AND name IN ({placeholders})",
            required,
        )
        present = {row[0] for row in result.rows}
        return [table for table in required if table not in present]
