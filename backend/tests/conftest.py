"""Root conftest - shared fixtures: in-memory SQLite store and ASGI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_workout_store overridden so routes use the test store

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency; primary key and
      rows-affected semantics match PostgreSQL for this table
"""

import os

# Settings are read at import time by workout_log.main
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from workout_log.api.routes.workouts import get_workout_store  # noqa: E402
from workout_log.infrastructure.database import DatabaseSessionManager  # noqa: E402
from workout_log.infrastructure.workout_store import SqlWorkoutStore  # noqa: E402
from workout_log.main import app  # noqa: E402


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await mgr.create_schema()
    yield mgr
    await mgr.close()


@pytest.fixture
def store(manager):
    return SqlWorkoutStore(manager)


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_workout_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def push_day():
    """A realistic exercise payload: nested, with arrays and notes."""
    return {
        "26.05_hpp": [
            {"ex_name": "Flat dumbbell press", "sets": 3, "reps": 12, "weight": 14, "notes": "Last set 15"},
            {"ex_name": "Incline dumbbell rows", "sets": 3, "reps": 12, "weight": 14, "notes": None},
        ],
    }
