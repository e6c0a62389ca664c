"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from inventory_assistant.api.router import api_router
from inventory_assistant.config import settings
from inventory_assistant.db.turso import TursoClient
from inventory_assistant.matching.resolver import FuzzyResolver
from inventory_assistant.repositories.candidate_repo import CandidateRepository

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Connect to the inventory database
    - Build the candidate repository and fuzzy resolver

    Shutdown:
    - Close database connection
    """
    logger.info(f"Starting {settings.app_name}...")

    async with TursoClient() as db:
        app.state.db = db

        candidate_repo = CandidateRepository(
            db,
            similarity_floor=settings.fuzzy_similarity_floor,
            limit=settings.fuzzy_similarity_limit,
        )
        app.state.candidate_repo = candidate_repo
        app.state.fuzzy_resolver = FuzzyResolver(
            candidate_repo,
            accept_threshold=settings.fuzzy_accept_threshold,
            locale_confidence=settings.fuzzy_locale_confidence,
            hybrid_min_confidence=settings.fuzzy_accept_threshold,
        )
        logger.info("Fuzzy resolver initialized")

        yield

        logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Typo-tolerant filter resolution for the inventory assistant",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "inventory_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
