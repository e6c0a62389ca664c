"""Health checks.

Readiness means filters can actually be resolved: the inventory database
answers and every table the candidate queries read from exists.
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from inventory_assistant.config import settings

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    status: str
    checks: dict[str, str] = Field(description="Check name -> ok/failed/detail")
    missing_tables: list[str] = Field(default_factory=list)


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        version=settings.app_version,
        environment=settings.app_env,
    )


@router.get("/live")
async def liveness() -> dict[str, str]:
    """Process is up; no dependencies checked."""
    return {"status": "alive"}


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request) -> ReadinessResponse:
    """Database reachable and candidate tables present."""
    db = getattr(request.app.state, "db", None)
    candidate_repo = getattr(request.app.state, "candidate_repo", None)
    if db is None or candidate_repo is None:
        return ReadinessResponse(
            status="not_ready", checks={"database": "not_configured"}
        )

    if not await db.is_healthy():
        return ReadinessResponse(status="not_ready", checks={"database": "failed"})

    missing = await candidate_repo.missing_tables()
    checks = {
        "database": "ok",
        "candidate_tables": "missing" if missing else "ok",
    }
    return ReadinessResponse(
        status="not_ready" if missing else "ready",
        checks=checks,
        missing_tables=missing,
    )
