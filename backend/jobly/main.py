"""Jobly API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JoblyError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup, disposed on shutdown (lifespan)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobly.api.error_handlers import register_error_handlers
from jobly.api.routes import companies, health, jobs
from jobly.config import get_settings
from jobly.infrastructure.database import close_db, init_db
from jobly.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Jobly API started")
    yield
    await close_db()
    logger.info("Jobly API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Jobly API", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router)
    app.include_router(companies.router)
    app.include_router(jobs.router)
    register_error_handlers(app)
    return app


app = create_app()
