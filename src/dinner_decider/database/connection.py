"""PostgreSQL connection pool management.

This module provides:
- Async connection pool management via asyncpg
- Connection lifecycle management via lifespan events
- A bounded ping used by the database health check
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import asyncpg

from dinner_decider.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

    from dinner_decider.core.config import Settings

logger = get_logger(__name__)

# Global connection pool
_pool: Pool | None = None


async def init_database_pool(settings: Settings) -> None:
    """Initialize PostgreSQL connection pool.

    Should be called during application startup (lifespan).

    Args:
        settings: Application settings.
    """
    global _pool  # noqa: PLW0603

    logger.info(
        "Initializing database connection pool",
        host=settings.database.host,
        port=settings.database.port,
        database=settings.database.name,
    )

    _pool = await asyncpg.create_pool(
        host=settings.database.host,
        port=settings.database.port,
        database=settings.database.name,
        user=settings.database.user,
        password=settings.DATABASE_PASSWORD or None,
        min_size=settings.database.min_pool_size,
        max_size=settings.database.max_pool_size,
        command_timeout=settings.database.command_timeout,
        ssl=settings.database.ssl or None,
    )

    try:
        async with _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
        logger.info("Database connection established successfully")
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError):
        logger.exception("Failed to connect to database")
        raise


async def close_database_pool() -> None:
    """Close PostgreSQL connection pool.

    Should be called during application shutdown (lifespan).
    """
    global _pool  # noqa: PLW0603

    if _pool is not None:
        logger.info("Closing database connection pool")
        await _pool.close()
        _pool = None
        logger.info("Database connection pool closed")


def get_database_pool() -> Pool:
    """Get the database connection pool.

    Raises:
        RuntimeError: If pool is not initialized.
    """
    if _pool is None:
        msg = "Database pool not initialized. Call init_database_pool() first."
        raise RuntimeError(msg)
    return _pool


async def ping_database(timeout: float, pool: Pool | None = None) -> None:
    """Run ``SELECT 1`` against the pool, bounded by ``timeout`` seconds.

    Args:
        timeout: Maximum time to wait for a connection and the query.
        pool: Pool to ping. Defaults to the global pool.

    Raises:
        RuntimeError: If no pool is available.
        TimeoutError: If the ping does not finish in time.
        asyncpg.PostgresError: If the query fails.
    """
    target = pool if pool is not None else get_database_pool()
    async with asyncio.timeout(timeout):
        async with target.acquire() as conn:
            await conn.fetchval("SELECT 1")
