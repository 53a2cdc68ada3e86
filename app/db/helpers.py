# app/db/helpers.py
"""
Read helpers shared by the repositories.
Rows come back as dicts (the pool installs dict_row on every connection).
"""

from typing import Any

import psycopg

from app.db.pool import get_db_connection
from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class DatabaseError(Exception):
    """Custom exception for database operations."""

    def __init__(self, message: str, operation: str = "unknown", recoverable: bool = True):
        super().__init__(message)
        self.operation = operation
        self.recoverable = recoverable


async def _run(
    operation: str,
    query: str,
    params: tuple,
    connection: psycopg.AsyncConnection | None,
    many: bool,
):
    async def _execute(conn: psycopg.AsyncConnection):
        async with conn.cursor() as cur:
            await cur.execute(query, params)
            if many:
                return await cur.fetchall()
            return await cur.fetchone()

    try:
        if connection:
            return await _execute(connection)
        async with await get_db_connection() as conn:
            return await _execute(conn)

    except psycopg.Error as e:
        logger.error(f"Database {operation} error", query=query[:100], error=str(e))
        raise DatabaseError(f"Query failed: {e}", operation=operation) from e


async def fetch_one(
    query: str, params: tuple = (), *, connection: psycopg.AsyncConnection | None = None
) -> dict[str, Any] | None:
    """
    Execute query and return single row as dict.

    Args:
        query: SQL query with %s placeholders
        params: Query parameters
        connection: Optional existing connection

    Returns:
        Dict with row data or None if no results
    """
    row = await _run("fetch_one", query, params, connection, many=False)
    return row if row else None


async def fetch_all(
    query: str, params: tuple = (), *, connection: psycopg.AsyncConnection | None = None
) -> list[dict[str, Any]]:
    """
    Execute query and return all rows as list of dicts.

    Args:
        query: SQL query with %s placeholders
        params: Query parameters
        connection: Optional existing connection

    Returns:
        List of dicts with row data
    """
    rows = await _run("fetch_all", query, params, connection, many=True)
    return list(rows or [])


async def fetch_val(
    query: str, params: tuple = (), *, connection: psycopg.AsyncConnection | None = None
) -> Any:
    """Execute query and return the first column of the first row."""
    row = await _run("fetch_val", query, params, connection, many=False)
    return list(row.values())[0] if row else None
