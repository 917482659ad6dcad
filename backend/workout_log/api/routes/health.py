"""Health Routes - is the process up, and can it reach the workouts table.

Invariants:
    - GET /api/v1/health/ answers 200 whenever the process serves requests
    - GET /api/v1/health/ready asks the injected WorkoutStore; 503 when it cannot answer
    - Both answer with the same {success, data?, error?} envelope as the workout routes
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from workout_log.api.routes.workouts import get_workout_store
from workout_log.core.repository_protocols import WorkoutStore
from workout_log.schemas.workout import failed, ok

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return ok({"service": "workout-log-api", "version": "1.0.0"})


@router.get("/ready")
async def readiness(store: WorkoutStore = Depends(get_workout_store)):
    """Ready once the workout store can reach its database."""
    if not await store.ping():
        logger.warning("Readiness check failed: workout store unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=failed("Workout store unavailable"),
        )
    return ok({"store": "reachable"})
