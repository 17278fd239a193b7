"""Onboarding Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map OnboardingError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema managed by Alembic (backend/alembic), never created implicitly here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from onboarding.api.error_handlers import register_error_handlers
from onboarding.api.routes import (
    ai_overview, employees, health, tasks, template_tasks, templates,
)
from onboarding.config import get_settings
from onboarding.infrastructure.database import close_db, init_db
from onboarding.infrastructure.observability import setup_logging

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
    logger.info("Onboarding Tracker API started")
    yield
    await close_db()
    logger.info("Onboarding Tracker API shutting down")


app = FastAPI(
    title="Onboarding Tracker API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)
app.include_router(tasks.router)
app.include_router(templates.router)
app.include_router(template_tasks.router)
app.include_router(ai_overview.router)

register_error_handlers(app)
