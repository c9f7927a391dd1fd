"""Repository test fixtures — fresh in-memory SQLite database per test.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the users table
    - Sessions use expire_on_commit=False, as DatabaseSessionManager does
    - `repository` runs each shared test against both backends
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from user_service.db.base import Base
from user_service.repositories.memory_user_repository import InMemoryUserRepository
from user_service.repositories.sql_user_repository import SqlUserRepository
import user_service.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
def sql_repository(test_db):
    return SqlUserRepository(test_db)


@pytest.fixture
def memory_repository():
    return InMemoryUserRepository()


@pytest.fixture(params=["sql", "memory"])
def repository(request, test_db):
    if request.param == "sql":
        return SqlUserRepository(test_db)
    return InMemoryUserRepository()
