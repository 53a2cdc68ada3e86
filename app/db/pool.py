# app/db/pool.py
"""
PostgreSQL connection pool manager using psycopg_pool.
Connections are autocommit and read through dict rows.
"""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import psycopg
from psycopg import sql
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from app.config import settings
from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class DatabasePoolManager:
    """
    Database connection pool manager.

    Opened once on service startup and shared by every repository.
    """

    def __init__(self):
        self.pool: AsyncConnectionPool | None = None
        self._initialized = False
        self._closed = False

    async def initialize(self) -> None:
        """Initialize the connection pool on application startup."""
        if self._initialized:
            logger.warning("Database pool already initialized")
            return

        if self._closed:
            raise RuntimeError("Cannot reinitialize closed pool")

        pool_config = self._get_pool_config()

        try:
            logger.info("Initializing database connection pool")

            self.pool = AsyncConnectionPool(
                conninfo=settings.database_url(),
                open=False,
                **pool_config,
            )
            await self.pool.open()
            await self.pool.wait()

            self._initialized = True

            logger.info(
                "Database pool initialized successfully",
                min_size=pool_config["min_size"],
                max_size=pool_config["max_size"],
                timeout=pool_config["timeout"],
            )

        except Exception as e:
            logger.error("Failed to initialize database pool", error=str(e))
            self._initialized = False
            if self.pool:
                await self.pool.close()
                self.pool = None
            raise RuntimeError(f"Database pool initialization failed: {e}") from e

    def _get_pool_config(self) -> dict[str, Any]:
        config = settings.get_db_pool_config()
        config.update(
            {
                "check": AsyncConnectionPool.check_connection,
                "configure": self._configure_connection,
            }
        )
        return config

    async def _configure_connection(self, conn: psycopg.AsyncConnection) -> None:
        """Configure each new connection from the pool."""
        conn.row_factory = dict_row

        app_name = f"team-event-types-{settings.environment}"

        # Enable autocommit to avoid leaving connections in INTRANS state
        await conn.set_autocommit(True)

        # Don't parameterize SET; inline safely with Literal
        await conn.execute(sql.SQL("SET application_name = {}").format(sql.Literal(app_name)))
        await conn.execute("SET timezone = 'UTC'")
        await conn.execute("SET statement_timeout = '30s'")

    async def close(self) -> None:
        """Close the connection pool gracefully."""
        if not self._initialized or self._closed:
            return

        logger.info("Closing database connection pool")

        try:
            if self.pool:
                await asyncio.wait_for(self.pool.close(), timeout=30.0)
        except TimeoutError:
            logger.warning("Database pool close timed out, forcing shutdown")
        finally:
            self._initialized = False
            self._closed = True

        logger.info("Database pool closed successfully")

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[psycopg.AsyncConnection, None]:
        """
        Get a connection from the pool.

        Usage:
            async with db_pool.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute("SELECT 1")
        """
        if not self._initialized:
            raise RuntimeError("Database pool not initialized. Call initialize() first.")

        if self._closed:
            raise RuntimeError("Database pool is closed")

        async with self.pool.connection() as conn:
            yield conn


# Global pool instance
db_pool = DatabasePoolManager()


async def get_db_connection():
    """Get database connection from pool."""
    return db_pool.connection()
