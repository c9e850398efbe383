#!/usr/bin/env python3
"""
Look up a single note directly in the database

Usage:
    python -m noteful.tools.lookup_note --id 1005 --env development
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, Optional

import asyncpg
from dotenv import load_dotenv

from noteful.database.connection import close_database, open_database

logger = logging.getLogger(__name__)


async def lookup_note(pool: asyncpg.Pool, note_id: int) -> Optional[Dict[str, Any]]:
    """Fetch one note row by id, or None when it does not exist"""
    async with pool.acquire() as conn:
        row = await conn.fetchrow(
            "SELECT id, title, content, folder_id FROM notes WHERE id = $1", note_id
        )
    return dict(row) if row else None


async def run_lookup(note_id: int, env_name: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Open a pool, log the note, log any failure, and always release the pool"""
    pool = None
    note = None
    try:
        pool = await open_database(env_name)
        note = await lookup_note(pool, note_id)
        if note is None:
            logger.warning(f"Note {note_id} not found")
        else:
            logger.info(f"id: {note['id']}")
            logger.info(f"title: {note['title']}")
            logger.info(f"content: {note['content']}")
    except Exception as e:
        logger.error(f"Note lookup failed: {e}")
    finally:
        await close_database(pool)
    return note


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Look up a note by id")
    parser.add_argument("--id", type=int, default=1005, help="Note id (default: 1005)")
    parser.add_argument("--env", default=None, help="Named environment (default: $ENV)")
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    note = asyncio.run(run_lookup(args.id, args.env))
    return 0 if note else 1


if __name__ == "__main__":
    sys.exit(main())
