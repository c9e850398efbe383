"""
Noteful table definitions
"""

import logging

import asyncpg

logger = logging.getLogger(__name__)

# Parents before children
SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS folders (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL UNIQUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tags (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL UNIQUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS notes (
        id SERIAL PRIMARY KEY,
        title TEXT NOT NULL,
        content TEXT,
        created TIMESTAMP NOT NULL DEFAULT now(),
        folder_id INTEGER REFERENCES folders(id) ON DELETE SET NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS notes_tags (
        note_id INTEGER NOT NULL REFERENCES notes(id) ON DELETE CASCADE,
        tag_id INTEGER NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
        PRIMARY KEY (note_id, tag_id)
    )
    """,
)


async def ensure_schema(pool: asyncpg.Pool) -> None:
    """Create the four Noteful tables if they do not exist (safe to run repeatedly)"""
    async with pool.acquire() as conn:
        async with conn.transaction():
            for statement in SCHEMA_STATEMENTS:
                await conn.execute(statement)
    logger.info("Database schema verified")
