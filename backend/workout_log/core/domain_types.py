"""Domain Types - the workout record and the identity types around it.

Invariants:
    - WorkoutDate is the natural key: one record per calendar date
    - WorkoutRecord is immutable; an update produces a new record
    - exercise_data is opaque - never parsed, reshaped or validated here
    - Wire shape is {"date": "YYYY-MM-DD", "wtype": str, "data": any}

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclass for the record: stores hand it back, handlers serialize it,
      nobody mutates it in between
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

WorkoutDate = NewType("WorkoutDate", date)


# ─── Enums ───────────────────────────────────────────────────────

class WireField(str, Enum):
    """JSON keys of a record on the wire."""
    DATE = "date"
    WORKOUT_TYPE = "wtype"
    EXERCISE_DATA = "data"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class WorkoutRecord:
    """One workout session tied to a unique date."""
    date: WorkoutDate
    workout_type: str
    exercise_data: Any

    def to_wire(self) -> dict:
        return {
            WireField.DATE.value: self.date.isoformat(),
            WireField.WORKOUT_TYPE.value: self.workout_type,
            WireField.EXERCISE_DATA.value: self.exercise_data,
        }
