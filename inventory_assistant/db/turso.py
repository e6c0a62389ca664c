"""libSQL connection for the inventory database.

The inventory tables (PCs, laptops, servers, peripheral logs) are owned by
the CRUD side of the app; this service only reads them. A ``libsql://``
URL with an auth token targets Turso cloud, anything else (typically
``file:inventory.db``) opens a local SQLite file.
"""

import logging
from typing import Any

from libsql_client import Client, ResultSet, create_client

from inventory_assistant.config import settings

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "file:inventory.db"


class TursoClient:
    """Async read connection to the inventory database.

    Usable as an async context manager:

        async with TursoClient() as db:
            result = await db.execute("SELECT 1")
    """

    def __init__(self, url: str | None = None, auth_token: str | None = None):
        self.url = url or settings.turso_database_url or DEFAULT_DATABASE_URL
        self.auth_token = auth_token or settings.turso_auth_token
        self._client: Client | None = None

    async def __aenter__(self) -> "TursoClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def is_remote(self) -> bool:
        """True when connecting to Turso cloud rather than a local file."""
        return bool(self.auth_token) and self.url.startswith("libsql://")

    async def connect(self) -> None:
        """Open the connection; a no-op if already open."""
        if self._client is not None:
            return

        if self.is_remote:
            self._client = create_client(url=self.url, auth_token=self.auth_token)
        else:
            self._client = create_client(url=self.url)
        logger.info(f"Connected to inventory database: {self.url}")

    async def execute(self, sql: str, params: list[Any] | None = None) -> ResultSet:
        """Run one statement with ``?`` placeholders.

        Raises:
            RuntimeError: If ``connect()`` has not been called
        """
        if self._client is None:
            msg = "Inventory database not connected. Call connect() first."
            raise RuntimeError(msg)
        return await self._client.execute(sql, params or [])

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("Inventory database connection closed")

    async def is_healthy(self) -> bool:
        """Round-trip a trivial query; False on any driver error."""
        if self._client is None:
            return False
        try:
            result = await self._client.execute("SELECT 1")
        except Exception as e:
            logger.warning(f"Inventory database health check failed: {e}")
            return False
        return len(result.rows) == 1
