#!/usr/bin/env python3
"""
Create the Noteful tables and load the fixture data

Usage:
    python -m noteful.tools.seed_database --env development
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from noteful.database.connection import database_session
from noteful.database.schema import ensure_schema
from noteful.database.seed import reseed

logger = logging.getLogger(__name__)


async def seed_database(env_name: Optional[str] = None) -> dict:
    async with database_session(env_name) as pool:
        await ensure_schema(pool)
        return await reseed(pool)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Reset a Noteful database to the fixture data")
    parser.add_argument("--env", default=None, help="Named environment (default: $ENV)")
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    try:
        counts = asyncio.run(seed_database(args.env))
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        return 1

    for table, count in counts.items():
        logger.info(f"{table}: {count} rows")
    return 0


if __name__ == "__main__":
    sys.exit(main())
