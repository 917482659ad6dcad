"""Error Hierarchy - typed, categorized exceptions for every workout-log failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the uniform envelope {success, error}
    - No driver text leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WorkoutLogError base: FastAPI global handler catches all
    - Handlers pick the status from the error type, never from message text
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, not for clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    workout_date: date | None = None
    debug_info: dict[str, Any] | None = None


class WorkoutLogError(Exception):
    """Base exception for all workout-log errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the uniform failure envelope."""
        return {"success": False, "error": self.message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        extra: dict[str, Any] = {"error_code": self.code}
        if self.context.workout_date is not None:
            extra["workout_date"] = self.context.workout_date.isoformat()
        if self.context.debug_info:
            extra["debug_info"] = self.context.debug_info
        return extra


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequestError(WorkoutLogError):
    """Request body, path or date failed validation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid request: {message}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class WorkoutNotFoundError(WorkoutLogError):
    """No record matches the requested date."""
    def __init__(self, workout_date: date, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.workout_date = workout_date
        super().__init__(
            f"No workout found for {workout_date.isoformat()}",
            "WORKOUT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.workout_date = workout_date


class WorkoutAlreadyExistsError(WorkoutLogError):
    """A record for the date is already stored (unique constraint)."""
    def __init__(self, workout_date: date, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.workout_date = workout_date
        super().__init__(
            f"Workout for {workout_date.isoformat()} already exists",
            "WORKOUT_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.workout_date = workout_date


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WorkoutLogError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class InternalError(WorkoutLogError):
    """Unexpected failure outside the typed hierarchy. The cause goes to debug_info only."""
    def __init__(self, cause: BaseException, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {
            **(ctx.debug_info or {}),
            "exception_type": type(cause).__name__,
            "exception": str(cause),
        }
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class StoreInitializationError(WorkoutLogError):
    """Store could not be brought up at startup. Fatal - the server must not serve."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Workout store initialization failed: {message}",
            "STORE_INIT_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
