import asyncio
from typing import Any, Dict, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from fund_service.database import PLACEHOLDER, QueryError, get_db
from fund_service.main import app

FUND_ROWS = [
    {"ticker": "ACME", "price": 10.5},
    {"ticker": "AAA", "price": 1.25},
    {"ticker": "AAA", "price": 1.5},
    {"ticker": "BBB", "price": 99.0},
]


class FakeDatabase:
    """In-memory stand-in for Database that filters rows on the bound ticker."""

    def __init__(self, rows: List[Dict[str, Any]], error: Optional[Exception] = None, delay: float = 0):
        self.rows = rows
        self.error = error
        self.delay = delay
        self.calls = []

    async def execute(self, query, params=()):
        params = tuple(params)
        self.calls.append((query, params))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        assert query.count(PLACEHOLDER) == len(params)
        (ticker,) = params
        return [dict(row) for row in self.rows if row["ticker"] == ticker]


@pytest.fixture
def fake_db():
    return FakeDatabase(FUND_ROWS)


@pytest.fixture
async def client(fake_db):
    app.dependency_overrides[get_db] = lambda: fake_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_db():
    return FakeDatabase(FUND_ROWS, error=QueryError("Database error: (2013, 'Lost connection')"))
