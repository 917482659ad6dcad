"""Workout Log API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {success, error} envelope
    - CORS configured from settings (not hardcoded)
    - Store initialized on startup via lifespan; failure aborts startup before serving

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One engine for the process lifetime, disposed on shutdown
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from workout_log.api.error_handlers import register_error_handlers
from workout_log.api.routes import health, workouts
from workout_log.config import get_settings
from workout_log.infrastructure.database import init_db
from workout_log.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    logger.info("Connected to database and ensured workouts table")
    yield
    await manager.close()
    logger.info("Workout Log API shutting down")


app = FastAPI(
    title="Workout Log API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(workouts.router)

register_error_handlers(app)

# Static frontend - optional, served only when the directory exists
if os.path.isdir(settings.frontend_dir):
    app.mount(
        "/frontend",
        StaticFiles(directory=settings.frontend_dir, html=True),
        name="frontend",
    )

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        index_file = os.path.join(settings.frontend_dir, "index.html")
        if not os.path.isfile(index_file):
            raise HTTPException(status_code=404, detail="frontend not found")
        return FileResponse(index_file)
