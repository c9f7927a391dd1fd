"""Repository Provider — hands out a UserRepository per request for the backend chosen at startup.

Invariants:
    - Backend fixed at construction (from Settings.repository_backend), never per request
    - SQL backend: one AsyncSession per repository() block, closed on exit
    - Memory backend: the same InMemoryUserRepository for the application's lifetime
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from user_service.core.domain_types import RepositoryBackend
from user_service.core.repository_protocols import UserRepository
from user_service.infrastructure.database import DatabaseSessionManager
from user_service.repositories.memory_user_repository import InMemoryUserRepository
from user_service.repositories.sql_user_repository import SqlUserRepository


class RepositoryProvider:
    """Builds UserRepository instances for one configured backend."""

    def __init__(
        self,
        backend: RepositoryBackend,
        db_manager: DatabaseSessionManager | None = None,
    ):
        if backend is RepositoryBackend.SQL and db_manager is None:
            raise ValueError("SQL repository backend requires a DatabaseSessionManager")
        self.backend = backend
        self.db_manager = db_manager
        self._memory = (
            InMemoryUserRepository() if backend is RepositoryBackend.MEMORY else None
        )

    @asynccontextmanager
    async def repository(self) -> AsyncIterator[UserRepository]:
        if self._memory is not None:
            yield self._memory
            return
        async with self.db_manager.session() as db:
            yield SqlUserRepository(db)
