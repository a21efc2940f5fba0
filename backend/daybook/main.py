"""Daybook API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DaybookError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized, and optionally created and seeded, in the lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from daybook import __version__
from daybook.api.error_handlers import register_error_handlers
from daybook.api.routes import (
    analytics, auth, catalog, entries, export, health, search, streak,
)
from daybook.config import get_settings
from daybook.infrastructure.database import init_db
from daybook.infrastructure.observability import setup_logging
from daybook.infrastructure.repositories import JournalGateway
from daybook.services.catalog_service import seed_reference_data

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
    if settings.create_schema_on_startup:
        await manager.create_schema()
    if settings.seed_on_startup:
        async with manager.session() as db:
            await seed_reference_data(JournalGateway(db))
    logger.info("Daybook API started")
    yield
    logger.info("Daybook API shutting down")
    await manager.dispose()


app = FastAPI(title="Daybook API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(entries.router)
app.include_router(search.router)
app.include_router(streak.router)
app.include_router(analytics.router)
app.include_router(catalog.router)
app.include_router(export.router)

register_error_handlers(app)
