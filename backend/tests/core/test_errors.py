"""Error Hierarchy - status codes, categories and envelope rendering.

Tests:
    - each error kind maps to its HTTP status
    - to_response renders the failure envelope only
    - log_extra carries the error code plus whatever context is set
    - validation and unexpected failures have their own typed errors
"""

from datetime import date

from workout_log.core.errors import (
    BadRequestError,
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InternalError,
    StoreInitializationError,
    WorkoutAlreadyExistsError,
    WorkoutLogError,
    WorkoutNotFoundError,
)

DAY = date(2025, 5, 26)


def test_not_found_is_404():
    err = WorkoutNotFoundError(DAY)
    assert err.http_status == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.workout_date == DAY
    assert "2025-05-26" in err.message


def test_already_exists_is_409_conflict():
    err = WorkoutAlreadyExistsError(DAY)
    assert err.http_status == 409
    assert err.category is ErrorCategory.CONFLICT
    assert err.code == "WORKOUT_ALREADY_EXISTS"


def test_database_error_is_500_critical():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Database execute failed: Connection or operational error"


def test_store_initialization_error_is_workout_log_error():
    err = StoreInitializationError("cannot connect")
    assert isinstance(err, WorkoutLogError)
    assert err.code == "STORE_INIT_FAILED"


def test_to_response_is_failure_envelope():
    body = WorkoutNotFoundError(DAY).to_response()
    assert body == {"success": False, "error": "No workout found for 2025-05-26"}


def test_log_extra_includes_code_and_date():
    extra = WorkoutAlreadyExistsError(DAY).log_extra()
    assert extra == {"error_code": "WORKOUT_ALREADY_EXISTS", "workout_date": "2025-05-26"}


def test_log_extra_without_date():
    assert DatabaseError("x", "query").log_extra() == {"error_code": "DATABASE_ERROR"}


def test_bad_request_is_400_validation():
    err = BadRequestError("body.wtype: Field required")
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert err.severity is ErrorSeverity.WARNING
    assert err.to_response() == {
        "success": False, "error": "Invalid request: body.wtype: Field required",
    }


def test_internal_error_hides_cause_from_client():
    err = InternalError(RuntimeError("password=hunter2"))
    assert err.http_status == 500
    assert err.category is ErrorCategory.INTERNAL
    assert err.to_response() == {"success": False, "error": "An unexpected error occurred"}
    assert err.context.debug_info == {
        "exception_type": "RuntimeError", "exception": "password=hunter2",
    }


def test_internal_error_merges_existing_debug_info():
    ctx = ErrorContext(debug_info={"route": "/allworkouts"})
    err = InternalError(KeyError("x"), ctx)
    assert err.context.debug_info["route"] == "/allworkouts"
    assert err.context.debug_info["exception_type"] == "KeyError"


def test_log_extra_includes_debug_info():
    err = BadRequestError("bad", ErrorContext(debug_info={"errors": []}))
    assert err.log_extra() == {"error_code": "VALIDATION_ERROR", "debug_info": {"errors": []}}
