"""Activity & Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → envelope JSON responses
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager created on startup and owned by app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import make_url

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import activity_groups, health, todo_items
from todo_api.config import get_settings
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database_url = settings.resolved_database_url
    url = make_url(database_url)
    logger.info(
        f"Connecting to database {url.database} on {url.host}:{url.port}",
    )
    app.state.db_manager = DatabaseSessionManager(
        database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Activity & Todo API started")
    yield
    logger.info("Activity & Todo API shutting down")
    await app.state.db_manager.dispose()


app = FastAPI(
    title="Activity & Todo API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(activity_groups.router)
app.include_router(todo_items.router)

register_error_handlers(app)
