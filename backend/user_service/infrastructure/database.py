"""Database Session Manager — async engine with automatic rollback, schema bootstrap and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - In-memory SQLite shares one connection (StaticPool) so every session sees one database
    - Schema is created from Base.metadata at startup (create_schema) — no migrations

Design Decisions:
    - Built explicitly by the application factory and stored on app.state; no module-level
      singleton (ADR: explicit dependency construction)
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from user_service.core.errors import DatabaseError
from user_service.db.base import Base
import user_service.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def is_memory_database(database_url: str) -> bool:
    """True for sqlite URLs without a file (sqlite://, sqlite+aiosqlite:///:memory:)."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (
        None, "", ":memory:",
    )


class DatabaseSessionManager:
    """Manages async database sessions with rollback, schema bootstrap and health checks."""

    def __init__(self, database_url: str, echo: bool = False):
        engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}
        if is_memory_database(database_url):
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        self.database_url = database_url
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables (auto-migrate). Failures propagate: startup must abort."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready", extra={"database": self.database_url})

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
