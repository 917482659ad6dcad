"""SQL Workout Store - WorkoutStore implementation over the shared session manager.

Invariants:
    - One SQL statement per operation (update adds a read-after-write SELECT)
    - create relies on the primary key to reject duplicates; no read-then-write check
    - update/delete succeed only when exactly one row is affected; zero → WorkoutNotFoundError
    - list_all materializes the whole table, ordered by date

Design Decisions:
    - Unique violations recognized by SQLSTATE 23505 (PostgreSQL) or the SQLite
      extended result code, never by message text
    - Core-level insert/update/delete statements: rowcount is reported by the driver
"""

import logging
import sqlite3
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from workout_log.core.domain_types import WorkoutDate, WorkoutRecord
from workout_log.core.errors import (
    DatabaseError, WorkoutAlreadyExistsError, WorkoutNotFoundError,
)
from workout_log.infrastructure.database import DatabaseSessionManager
from workout_log.models.workout import Workout

logger = logging.getLogger(__name__)

PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_CODES = frozenset({
    sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY,
    sqlite3.SQLITE_CONSTRAINT_UNIQUE,
})


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a primary-key/unique constraint violation."""
    # adapted driver errors may carry the code themselves or on their __cause__
    for err in (exc.orig, getattr(exc.orig, "__cause__", None)):
        if err is None:
            continue
        sqlstate = getattr(err, "sqlstate", None) or getattr(err, "pgcode", None)
        if sqlstate is not None:
            return sqlstate == PG_UNIQUE_VIOLATION
        if getattr(err, "sqlite_errorcode", None) in SQLITE_UNIQUE_CODES:
            return True
    return False


class SqlWorkoutStore:
    """Durable CRUD over the workouts table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def create(
        self, date: WorkoutDate, workout_type: str, exercise_data: Any,
    ) -> WorkoutDate:
        try:
            async with self._manager.session() as db:
                await db.execute(
                    insert(Workout).values(
                        date=date,
                        workout_type=workout_type,
                        exercise_data=exercise_data,
                    ),
                )
                await db.commit()
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.warning(
                    "Duplicate workout date rejected",
                    extra={"workout_date": date.isoformat()},
                )
                raise WorkoutAlreadyExistsError(date)
            logger.error(f"DB integrity error on create: {e}")
            raise DatabaseError("Integrity constraint violated", "insert")
        logger.info("Workout added", extra={"workout_date": date.isoformat()})
        return date

    async def get(self, date: WorkoutDate) -> WorkoutRecord:
        async with self._manager.session() as db:
            result = await db.execute(
                select(Workout).where(Workout.date == date),
            )
            workout = result.scalar_one_or_none()
            if workout is None:
                raise WorkoutNotFoundError(date)
            return workout.to_record()

    async def list_all(self) -> list[WorkoutRecord]:
        async with self._manager.session() as db:
            result = await db.execute(select(Workout).order_by(Workout.date))
            return [w.to_record() for w in result.scalars().all()]

    async def update(
        self, date: WorkoutDate, exercise_data: Any,
    ) -> WorkoutRecord:
        async with self._manager.session() as db:
            result = await db.execute(
                update(Workout)
                .where(Workout.date == date)
                .values(exercise_data=exercise_data),
            )
            self._expect_one_row(result.rowcount, date, "update")
            await db.commit()
            logger.info(
                "Workout updated",
                extra={"workout_date": date.isoformat(), "rows_affected": result.rowcount},
            )
        return await self.get(date)

    async def delete(self, date: WorkoutDate) -> WorkoutDate:
        async with self._manager.session() as db:
            result = await db.execute(
                delete(Workout).where(Workout.date == date),
            )
            self._expect_one_row(result.rowcount, date, "delete")
            await db.commit()
        logger.info(
            "Workout removed",
            extra={"workout_date": date.isoformat(), "rows_affected": result.rowcount},
        )
        return date

    @staticmethod
    def _expect_one_row(rowcount: int, date: WorkoutDate, operation: str) -> None:
        if rowcount == 1:
            return
        if rowcount == 0:
            logger.warning(
                f"Workout {operation} matched no rows",
                extra={"workout_date": date.isoformat(), "rows_affected": 0},
            )
            raise WorkoutNotFoundError(date)
        # date is the primary key, so anything else means the driver cannot count rows
        raise DatabaseError(f"unexpected rows affected ({rowcount})", operation)

    async def ping(self) -> bool:
        """True when the database answers; backs GET /api/v1/health/ready."""
        return await self._manager.health_check()
