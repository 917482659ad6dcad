"""Error Mapping - storage faults become 500 envelopes; unexpected errors never leak.

Unexpected errors are logged as InternalError with the cause in debug_info;
validation failures are logged as BadRequestError with the offending locations.

Uses a store test double injected through the get_workout_store dependency.
"""

import logging
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from workout_log.api.routes.workouts import get_workout_store
from workout_log.core.errors import DatabaseError
from workout_log.main import app


class _BrokenStore:
    """Every operation fails the way an unreachable database does."""

    def __init__(self, exc: Exception):
        self._exc = exc

    async def create(self, date, workout_type, exercise_data):
        raise self._exc

    async def get(self, date):
        raise self._exc

    async def list_all(self):
        raise self._exc

    async def update(self, date, exercise_data):
        raise self._exc

    async def delete(self, date):
        raise self._exc

    async def ping(self):
        raise self._exc


REQUESTS = [
    ("GET", "/allworkouts", None),
    ("GET", "/workout/2025-05-26", None),
    ("POST", "/addworkout", {"date": "2025-05-26", "wtype": "push", "data": {}}),
    ("PATCH", "/updateworkout/2025-05-26", {"data": {}}),
    ("DELETE", "/removeworkout/2025-05-26", None),
]


@pytest.fixture
async def broken_client():
    def make(exc: Exception):
        app.dependency_overrides[get_workout_store] = lambda: _BrokenStore(exc)
        return AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        )
    yield make
    app.dependency_overrides.clear()


@pytest.mark.parametrize("method,url,body", REQUESTS)
async def test_database_error_is_500_envelope(broken_client, method, url, body):
    async with broken_client(DatabaseError("Connection or operational error", "execute")) as c:
        res = await c.request(method, url, json=body)
    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "error": "Database execute failed: Connection or operational error",
    }


async def test_unexpected_exception_is_generic_500(broken_client):
    async with broken_client(RuntimeError("password=hunter2 leaked")) as c:
        res = await c.get("/allworkouts")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "An unexpected error occurred"}


async def test_bad_request_never_reaches_store(broken_client):
    async with broken_client(AssertionError("store must not be called")) as c:
        res = await c.post("/addworkout", json={"date": str(date(2025, 5, 26))})
    assert res.status_code == 400


async def test_unexpected_exception_logs_internal_error(broken_client, caplog):
    caplog.set_level(logging.ERROR, logger="workout_log.api.error_handlers")
    async with broken_client(RuntimeError("password=hunter2 leaked")) as c:
        await c.get("/allworkouts")
    [record] = [r for r in caplog.records if r.name == "workout_log.api.error_handlers"]
    assert record.error_code == "INTERNAL_ERROR"
    assert record.debug_info["exception_type"] == "RuntimeError"
    assert record.path == "/allworkouts"
    assert record.exc_info is not None


async def test_validation_failure_logs_bad_request(broken_client, caplog):
    caplog.set_level(logging.WARNING, logger="workout_log.api.error_handlers")
    async with broken_client(AssertionError("store must not be called")) as c:
        res = await c.post("/addworkout", json={"date": "2025-05-26", "data": {}})
    assert res.json() == {
        "success": False, "error": "Invalid request: body.wtype: Field required",
    }
    [record] = [r for r in caplog.records if r.name == "workout_log.api.error_handlers"]
    assert record.error_code == "VALIDATION_ERROR"
    assert record.debug_info == {"errors": [{"loc": ["body", "wtype"], "type": "missing"}]}
