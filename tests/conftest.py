"""
Shared fixtures: a sample upstream payload and a throwaway SQLite database.
"""

import copy
from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from infrastructure.persistence.database import Database

SNAPSHOT_PAYLOAD = {
    "time": {
        "updated": "Sep 2, 2024 07:07:20 UTC",
        "updatedISO": "2024-09-02T07:07:20+00:00",
        "updateduk": "Sep 2, 2024 at 08:07 BST",
    },
    "disclaimer": "just for test",
    "chartName": "Bitcoin",
    "bpi": {
        "USD": {
            "code": "USD",
            "symbol": "&#36;",
            "rate": "57,756.298",
            "description": "United States Dollar",
            "rate_float": 57756.2984,
        },
        "GBP": {
            "code": "GBP",
            "symbol": "&pound;",
            "rate": "43,984.02",
            "description": "British Pound Sterling",
            "rate_float": 43984.0203,
        },
        "EUR": {
            "code": "EUR",
            "symbol": "&euro;",
            "rate": "52,243.287",
            "description": "Euro",
            "rate_float": 52243.2865,
        },
    },
}


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 9, 2, 7, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def snapshot_payload():
    return copy.deepcopy(SNAPSHOT_PAYLOAD)


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session
