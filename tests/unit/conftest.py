"""
In-memory stand-ins for the asyncpg pool used by the unit suite
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Tuple

import pytest


class FakeConnection:
    """Records every statement issued through it on the owning pool"""

    def __init__(self, pool: "FakePool"):
        self.pool = pool

    @asynccontextmanager
    async def transaction(self):
        self.pool.events.append(("begin",))
        try:
            yield
        except BaseException:
            self.pool.events.append(("rollback",))
            raise
        self.pool.events.append(("commit",))

    async def _record(self, event: Tuple) -> None:
        # Yield to the loop like a real network round trip
        await asyncio.sleep(0)
        self.pool.events.append(event)
        if self.pool.fail_on and self.pool.fail_on in event[1]:
            raise RuntimeError(f"simulated failure on: {event[1]}")

    async def execute(self, query: str, *args) -> str:
        await self._record(("execute", " ".join(query.split()), args))
        return "DELETE 0"

    async def executemany(self, query: str, args) -> None:
        await self._record(("executemany", query, list(args)))

    async def fetchval(self, query: str, *args) -> Any:
        await self._record(("fetchval", query, args))
        return 1

    async def fetchrow(self, query: str, *args) -> Optional[Dict[str, Any]]:
        await self._record(("fetchrow", query, args))
        return self.pool.rows.get(args[0]) if args else None


class FakePool:
    """Enough of asyncpg.Pool for the loader, connection and tool code paths"""

    def __init__(self):
        self.events: List[Tuple] = []
        self.rows: Dict[Any, Dict[str, Any]] = {}
        self.fail_on: Optional[str] = None
        self.close_calls = 0
        self.close_error: Optional[Exception] = None
        self._closing = False

    @asynccontextmanager
    async def acquire(self):
        yield FakeConnection(self)

    def is_closing(self) -> bool:
        return self._closing

    async def close(self) -> None:
        self.close_calls += 1
        if self.close_error:
            raise self.close_error
        self._closing = True

    def statements(self, kind: Optional[str] = None) -> List[str]:
        return [e[1] for e in self.events if len(e) > 1 and (kind is None or e[0] == kind)]

    def index_of(self, fragment: str) -> int:
        for i, event in enumerate(self.events):
            if len(event) > 1 and fragment in event[1]:
                return i
        raise AssertionError(f"No statement containing {fragment!r}")

    def last_index_of(self, fragment: str) -> int:
        found = [i for i, e in enumerate(self.events) if len(e) > 1 and fragment in e[1]]
        if not found:
            raise AssertionError(f"No statement containing {fragment!r}")
        return found[-1]


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()
