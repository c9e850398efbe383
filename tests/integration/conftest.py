"""
Integration fixtures: a real PostgreSQL test database, reset before every test

If the test database cannot be opened the whole run stops. Run only the
unit suite with `pytest -m "not integration"`.
"""

import asyncio

import asyncpg
import httpx
import pytest
import pytest_asyncio

from noteful.app import app
from noteful.database.connection import close_database, open_database
from noteful.database.schema import ensure_schema
from noteful.database.seed import reseed

OPEN_TIMEOUT = 10


async def open_test_pool():
    """Open the test database pool or abort the run"""
    try:
        return await asyncio.wait_for(open_database("test"), timeout=OPEN_TIMEOUT)
    except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError) as e:
        pytest.exit(f"Test database unavailable: {e!r}", returncode=1)


@pytest_asyncio.fixture
async def db_pool():
    """Test database pool with the schema in place and fixture data freshly loaded"""
    pool = await open_test_pool()
    try:
        await ensure_schema(pool)
        await reseed(pool)
        yield pool
    finally:
        await close_database(pool)


@pytest_asyncio.fixture
async def api_client(db_pool):
    """In-process client for the API sharing the test pool"""
    app.state.db_pool = db_pool
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.state.db_pool = None
