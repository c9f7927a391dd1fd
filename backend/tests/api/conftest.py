"""API test fixtures — application factory + httpx client per test.

Invariants:
    - Every test gets its own app with a fresh in-memory SQLite database
    - startup()/shutdown() driven explicitly: ASGITransport does not run lifespan

Design Decisions:
    - Real stack end to end (routes -> service -> SQL repository); no dependency overrides
      except where a test needs a failure the store cannot produce
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_service.config import Settings
from user_service.core.domain_types import RepositoryBackend
from user_service.main import create_app, shutdown, startup


def _settings(**overrides) -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
        **overrides,
    )


@pytest.fixture
async def app():
    app = create_app(_settings())
    await startup(app)
    yield app
    await shutdown(app)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def memory_app():
    app = create_app(_settings(repository_backend=RepositoryBackend.MEMORY))
    await startup(app)
    yield app
    await shutdown(app)


@pytest.fixture
async def memory_client(memory_app):
    async with AsyncClient(
        transport=ASGITransport(app=memory_app), base_url="http://test",
    ) as ac:
        yield ac
