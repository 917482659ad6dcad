"""Boundary Protocols - contract between the request handlers and storage.

Invariants:
    - Handlers depend on WorkoutStore, never on a concrete engine or session
    - Failures are signalled with typed errors from core/errors.py:
      WorkoutNotFoundError, WorkoutAlreadyExistsError, DatabaseError
    - Mutations are judged by rows affected, not by absence of a driver error

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol

from workout_log.core.domain_types import WorkoutDate, WorkoutRecord


class WorkoutStore(Protocol):
    """Contract for workout persistence - implemented by infrastructure."""
    async def create(
        self, date: WorkoutDate, workout_type: str, exercise_data: Any,
    ) -> WorkoutDate: ...
    async def get(self, date: WorkoutDate) -> WorkoutRecord: ...
    async def list_all(self) -> list[WorkoutRecord]: ...
    async def update(
        self, date: WorkoutDate, exercise_data: Any,
    ) -> WorkoutRecord: ...
    async def delete(self, date: WorkoutDate) -> WorkoutDate: ...
    async def ping(self) -> bool: ...
