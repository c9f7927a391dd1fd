"""User Service API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserServiceError → {"message": ...} envelopes
    - Store and repository provider built on startup, stored on app.state, disposed on shutdown
    - No module-level application instance: every app comes from create_app()

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - startup()/shutdown() are plain coroutines so tests can drive them without a server
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from user_service.api.error_handlers import register_error_handlers
from user_service.api.routes import health, users
from user_service.config import Settings, get_settings
from user_service.core.domain_types import RepositoryBackend
from user_service.infrastructure.database import DatabaseSessionManager
from user_service.infrastructure.observability import setup_logging
from user_service.repositories.provider import RepositoryProvider

logger = logging.getLogger(__name__)


async def startup(app: FastAPI) -> None:
    """Configure logging, open the store and build the repository provider."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    db_manager = None
    if settings.repository_backend is RepositoryBackend.SQL:
        db_manager = DatabaseSessionManager(settings.database_url)
        await db_manager.create_schema()

    app.state.db_manager = db_manager
    app.state.repository_provider = RepositoryProvider(
        settings.repository_backend, db_manager,
    )
    logger.info(
        f"User service started (backend={settings.repository_backend.value})",
        extra={"database": settings.database_url},
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("User service shutting down")
    db_manager = getattr(app.state, "db_manager", None)
    if db_manager is not None:
        await db_manager.dispose()
        app.state.db_manager = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    await startup(app)
    yield
    await shutdown(app)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build a configured application; settings default to the environment."""
    app = FastAPI(title="User Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings or get_settings()

    # Routes, registered explicitly
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app
