"""Workout ORM - the single `workouts` table.

Invariants:
    - date is the primary key: the database, not the application, rejects duplicates
    - workout_type and exercise_data are NOT NULL
    - exercise_data is stored as-is (plain JSON, not JSONB) so it reads back verbatim

Design Decisions:
    - JSON over JSONB: JSONB normalizes key order and whitespace; the payload is opaque
    - Explicit column names (workout_type, exercise_data) match the persisted schema
"""

import datetime as dt
from typing import Any

from sqlalchemy import JSON, Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from workout_log.core.domain_types import WorkoutDate, WorkoutRecord
from workout_log.db.base import Base


class Workout(Base):
    """One logged workout session."""
    __tablename__ = "workouts"

    date: Mapped[dt.date] = mapped_column(Date, primary_key=True)
    workout_type: Mapped[str] = mapped_column(Text, nullable=False)
    exercise_data: Mapped[Any] = mapped_column(
        JSON(none_as_null=True), nullable=False,
    )

    def to_record(self) -> WorkoutRecord:
        return WorkoutRecord(
            date=WorkoutDate(self.date),
            workout_type=self.workout_type,
            exercise_data=self.exercise_data,
        )
