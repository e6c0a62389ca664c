"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from inventory_assistant.db.turso import TursoClient
from inventory_assistant.main import app
from inventory_assistant.matching.resolver import FuzzyResolver
from inventory_assistant.repositories.candidate_repo import CandidateRepository

# Columns the candidate queries read; the real tables carry many more
INVENTORY_SCHEMA = [
    "CREATE TABLE pcs (id INTEGER PRIMARY KEY, username TEXT, department TEXT)",
    "CREATE TABLE laptops (id INTEGER PRIMARY KEY, username TEXT, department TEXT)",
    "CREATE TABLE servers (id INTEGER PRIMARY KEY, department TEXT)",
    "CREATE TABLE maintenance_costs (id INTEGER PRIMARY KEY, username TEXT)",
    'CREATE TABLE "mouseLogs" (id INTEGER PRIMARY KEY, "pcUsername" TEXT)',
    'CREATE TABLE "keyboardLogs" (id INTEGER PRIMARY KEY, "pcUsername" TEXT)',
    'CREATE TABLE "ssdLogs" (id INTEGER PRIMARY KEY, "pcUsername" TEXT)',
    'CREATE TABLE "headphoneLogs" (id INTEGER PRIMARY KEY, "pcUsername" TEXT)',
    'CREATE TABLE "portableHDDLogs" (id INTEGER PRIMARY KEY, "pcUsername" TEXT)',
]


@pytest.fixture
def create_inventory_tables() -> Callable[[TursoClient], Awaitable[None]]:
    """Return a coroutine function that creates the inventory tables."""

    async def create(db: TursoClient) -> None:
        for statement in INVENTORY_SCHEMA:
            await db.execute(statement)

    return create


@pytest.fixture
async def app_db(tmp_path: Path) -> AsyncIterator[TursoClient]:
    """Temp file database wired into the app state."""
    async with TursoClient(url=f"file:{tmp_path / 'test_api.db'}") as db:
        candidate_repo = CandidateRepository(db)
        app.state.db = db
        app.state.candidate_repo = candidate_repo
        app.state.fuzzy_resolver = FuzzyResolver(candidate_repo)
        yield db

    del app.state.db
    del app.state.candidate_repo
    del app.state.fuzzy_resolver


@pytest.fixture
async def client(app_db: TursoClient) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with database."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
