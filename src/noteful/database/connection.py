"""
Database connection and pool management
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg
from fastapi import Request

from noteful.config.settings import DatabaseEnvironmentConfig

logger = logging.getLogger(__name__)


async def open_database(env_name: Optional[str] = None) -> asyncpg.Pool:
    """Open the database pool for a named environment.

    Raises ConfigurationError before any connection attempt when the
    environment is unknown or has no connection string.
    """
    settings = DatabaseEnvironmentConfig.get_config(env_name)

    pool = await asyncpg.create_pool(
        settings.database_url,
        min_size=settings.min_pool_size,
        max_size=settings.max_pool_size,
        command_timeout=60,
        statement_cache_size=0  # Fix for pgbouncer compatibility
    )

    # Test connection
    async with pool.acquire() as conn:
        await conn.fetchval("SELECT 1")

    logger.info(f"Database initialized for '{settings.env_name}' ({settings.database_name})")
    return pool


async def close_database(pool: Optional[asyncpg.Pool]) -> None:
    """Close the database pool. Failures are logged since the process is shutting down anyway."""
    if pool is None:
        return
    if pool.is_closing():
        logger.debug("Database pool already closed")
        return

    try:
        await pool.close()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Failed to close database connections: {e}")


@asynccontextmanager
async def database_session(env_name: Optional[str] = None) -> AsyncIterator[asyncpg.Pool]:
    """Open a pool for the duration of a block and always release it"""
    pool = await open_database(env_name)
    try:
        yield pool
    finally:
        await close_database(pool)


def get_db_pool(request: Request) -> asyncpg.Pool:
    """FastAPI dependency returning the pool owned by the application lifespan"""
    pool = getattr(request.app.state, "db_pool", None)
    if pool is None:
        raise RuntimeError("Database pool is not initialized")
    return pool
