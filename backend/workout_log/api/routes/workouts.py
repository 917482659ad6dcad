"""Workout Routes - the five request handlers over the WorkoutStore.

Invariants:
    - Handlers are stateless: the store arrives through Depends(get_workout_store)
    - Every response is the envelope {success, data?, error?}
    - Malformed bodies and unparseable dates never reach the store (400 via error_handlers)
    - Store errors propagate as typed exceptions; error_handlers picks the status

Design Decisions:
    - Paths kept as the original client expects them (/allworkouts, /addworkout, ...)
    - No business rules here: duplicate and not-found decisions belong to the store
"""

import logging

from fastapi import APIRouter, Depends, status

from workout_log.core.domain_types import WorkoutDate
from workout_log.core.repository_protocols import WorkoutStore
from workout_log.infrastructure.database import get_db_manager
from workout_log.infrastructure.workout_store import SqlWorkoutStore
from workout_log.schemas.workout import IsoDate, WorkoutCreate, WorkoutUpdate, ok

logger = logging.getLogger(__name__)
router = APIRouter(tags=["workouts"])


def get_workout_store() -> WorkoutStore:
    """FastAPI dependency - store bound to the process-wide session manager."""
    return SqlWorkoutStore(get_db_manager())


@router.get("/allworkouts")
async def list_workouts(store: WorkoutStore = Depends(get_workout_store)):
    """List every logged workout."""
    records = await store.list_all()
    return ok([r.to_wire() for r in records])


@router.get("/workout/{date}")
async def get_workout(
    date: IsoDate, store: WorkoutStore = Depends(get_workout_store),
):
    record = await store.get(WorkoutDate(date))
    return ok(record.to_wire())


@router.post("/addworkout", status_code=status.HTTP_201_CREATED)
async def add_workout(
    body: WorkoutCreate, store: WorkoutStore = Depends(get_workout_store),
):
    """Add a workout; 409 when the date is taken."""
    created = await store.create(WorkoutDate(body.date), body.wtype, body.data)
    return ok(created.isoformat())


@router.patch("/updateworkout/{date}")
async def update_workout(
    date: IsoDate,
    body: WorkoutUpdate,
    store: WorkoutStore = Depends(get_workout_store),
):
    """Replace exercise data and return the re-read record."""
    record = await store.update(WorkoutDate(date), body.data)
    return ok(record.to_wire())


@router.delete("/removeworkout/{date}")
async def remove_workout(
    date: IsoDate, store: WorkoutStore = Depends(get_workout_store),
):
    removed = await store.delete(WorkoutDate(date))
    return ok(removed.isoformat())
