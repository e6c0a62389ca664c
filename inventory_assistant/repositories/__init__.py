"""Repository layer for data access.

Repositories encapsulate database reads behind a small interface for the
service layer.
"""

from inventory_assistant.repositories.candidate_repo import (
    FIELD_SOURCES,
    CandidateFetchError,
    CandidateRepository,
)
from inventory_assistant.repositories.trigram import trigram_similarity

__all__ = [
    "FIELD_SOURCES",
    "CandidateFetchError",
    "CandidateRepository",
    "trigram_similarity",
]
