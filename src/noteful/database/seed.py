"""
Seed data loader

Clears and repopulates folders, tags, notes and notes_tags from the static
fixtures. Phases run strictly one after another; tables within a phase are
reseeded concurrently on separate pooled connections. Each table is reseeded
in its own transaction, so a failure in a later phase leaves the earlier
tables already reset.
"""

import asyncio
import logging
from typing import Sequence, Tuple

import asyncpg

from noteful.database.fixtures import SEED_PHASES, SeedTable

logger = logging.getLogger(__name__)


async def reseed_table(pool: asyncpg.Pool, table: SeedTable) -> int:
    """Delete every row of one table and insert its fixture rows"""
    columns = ", ".join(table.columns)
    placeholders = ", ".join(f"${i}" for i in range(1, len(table.columns) + 1))
    insert_sql = f"INSERT INTO {table.name} ({columns}) VALUES ({placeholders})"

    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.execute(f"DELETE FROM {table.name}")
            await conn.executemany(insert_sql, table.values())

            if table.serial_column:
                # Keep API-created ids clear of the explicit fixture ids
                await conn.execute(
                    f"SELECT setval(pg_get_serial_sequence('{table.name}', '{table.serial_column}'), "
                    f"COALESCE((SELECT MAX({table.serial_column}) FROM {table.name}), 1))"
                )

    logger.debug(f"Reseeded {table.name}: {len(table.rows)} rows")
    return len(table.rows)


async def reseed(pool: asyncpg.Pool, phases: Sequence[Tuple[SeedTable, ...]] = SEED_PHASES) -> dict:
    """Bring all fixture tables to their known state.

    Returns a mapping of table name to inserted row count. Any database error
    propagates and the remaining phases are not run.
    """
    counts = {}
    for index, phase in enumerate(phases, start=1):
        names = [table.name for table in phase]
        logger.debug(f"Seed phase {index}: {', '.join(names)}")
        # Let every table in the phase settle before surfacing a failure
        results = await asyncio.gather(
            *(reseed_table(pool, table) for table in phase),
            return_exceptions=True
        )
        for name, result in zip(names, results):
            if isinstance(result, BaseException):
                logger.error(f"Reseeding {name} failed in phase {index}: {result}")
                raise result
        counts.update(zip(names, results))

    logger.info(f"Database reseeded: {counts}")
    return counts
