"""asyncpg pool lifecycle for the Clay Craft API."""

import logging

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from asyncpg import Connection
from asyncpg import Pool

from claycraft_api.config.database import DatabaseSettings
from claycraft_api.config.database import get_database_settings

logger = logging.getLogger(__name__)


class Database:
    """Owns the process-wide connection pool.

    The pool is opened in the application lifespan and every repository
    borrows connections from it through ``get_db_connection``.
    """

    def __init__(self, settings: DatabaseSettings | None = None):
        self._settings = settings or get_database_settings()
        self._pool: Pool | None = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        """Open the pool. Calling it twice is a no-op."""
        if self.is_connected:
            logger.warning("Database pool already open")
            return

        settings = self._settings
        try:
            self._pool = await asyncpg.create_pool(
                settings.dsn,
                min_size=settings.min_pool_size,
                max_size=settings.max_pool_size,
                timeout=settings.pool_timeout,
                command_timeout=settings.command_timeout,
                server_settings={
                    "application_name": "claycraft-api",
                    "timezone": "UTC",
                },
            )
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Could not open database pool: {e}")
            raise
        logger.info(
            f"Database pool open ({settings.min_pool_size}-"
            f"{settings.max_pool_size} connections)"
        )

    async def disconnect(self) -> None:
        """Close the pool if it is open."""
        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        await pool.close()
        logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncGenerator[Connection]:
        """Borrow a connection for the duration of the block."""
        if self._pool is None:
            raise RuntimeError("Database pool is not open; call connect() first")

        async with self._pool.acquire() as connection:
            yield connection

    async def ping(self) -> bool:
        """Run a trivial query to see whether the database answers."""
        try:
            async with self.acquire() as connection:
                await connection.fetchval("SELECT 1")
        except (OSError, RuntimeError, asyncpg.PostgresError) as e:
            logger.error(f"Database ping failed: {e}")
            return False
        return True

    def pool_stats(self) -> dict[str, Any]:
        """Describe the pool for the health endpoint."""
        if self._pool is None:
            return {"status": "closed"}

        return {
            "status": "open",
            "size": self._pool.get_size(),
            "idle": self._pool.get_idle_size(),
            "min_size": self._pool.get_min_size(),
            "max_size": self._pool.get_max_size(),
        }


db = Database()


async def init_database() -> None:
    await db.connect()


async def close_database() -> None:
    await db.disconnect()


@asynccontextmanager
async def get_db_connection() -> AsyncGenerator[Connection]:
    """Borrow a connection from the application pool."""
    async with db.acquire() as connection:
        yield connection
