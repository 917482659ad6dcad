"""Error Handlers - global exception handlers rendering the response envelope.

Invariants:
    - WorkoutLogError → its own http_status, envelope with the error message
    - RequestValidationError (bad JSON, missing field, bad date) → BadRequestError, 400
    - Exception (catch-all) → InternalError, 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (WorkoutLogError), validation (Pydantic), catch-all (Exception)
    - Validation and catch-all failures are converted into the typed hierarchy
      so every response and log line goes through one renderer
    - Not-found, conflict and validation are logged as warnings; storage faults as errors
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from workout_log.core.errors import (
    BadRequestError, ErrorContext, ErrorSeverity, InternalError, WorkoutLogError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_workout_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _render(
    request: Request, exc: WorkoutLogError, cause: BaseException | None = None,
) -> JSONResponse:
    level = (
        logging.WARNING
        if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
        else logging.ERROR
    )
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={**exc.log_extra(), "path": request.url.path},
        exc_info=cause,
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_workout_error_handler(app: FastAPI) -> None:

    @app.exception_handler(WorkoutLogError)
    async def workout_error_handler(request: Request, exc: WorkoutLogError):
        """Handle all workout-log domain/infrastructure errors."""
        return _render(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed input is always a client error."""
        error = BadRequestError(
            _describe_validation_errors(exc),
            ErrorContext(debug_info={"errors": _loggable_errors(exc)}),
        )
        return _render(request, error)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        return _render(request, InternalError(exc), cause=exc)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """One readable line per offending field, e.g. 'body.wtype: Field required'."""
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    return "; ".join(parts) if parts else "malformed input"


def _loggable_errors(exc: RequestValidationError) -> list[dict]:
    # pydantic puts the raw input and exception objects in each entry; keep the shape only
    return [
        {"loc": list(e.get("loc", ())), "type": e.get("type")}
        for e in exc.errors()
    ]
