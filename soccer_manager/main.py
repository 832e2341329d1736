"""Soccer Manager API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SoccerManagerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and Redis initialized on startup, released on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from soccer_manager.api.error_handlers import register_error_handlers
from soccer_manager.api.routes import health, team, players, transfers
from soccer_manager.config import get_settings
from soccer_manager.infrastructure import database
from soccer_manager.infrastructure.observability import setup_logging
from soccer_manager.infrastructure.redis_client import init_redis, close_redis

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_redis(settings.redis_url)
    logger.info("Soccer Manager API started")
    yield
    logger.info("Soccer Manager API shutting down")
    await close_redis()
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(
    title="Soccer Manager API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(team.router)
app.include_router(players.router)
app.include_router(transfers.router)

register_error_handlers(app)
