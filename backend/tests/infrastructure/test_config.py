"""Settings tests — defaults, URL normalization and environment overrides."""

import pytest
from pydantic import ValidationError

from user_service.config import Settings
from user_service.core.domain_types import RepositoryBackend


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.max_body_bytes == 1_048_576
    assert settings.database_url == "sqlite+aiosqlite:///users.db"
    assert settings.repository_backend is RepositoryBackend.SQL


def test_plain_sqlite_url_gets_async_driver():
    settings = Settings(_env_file=None, database_url="sqlite:///data/users.db")
    assert settings.database_url == "sqlite+aiosqlite:///data/users.db"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("REPOSITORY_BACKEND", "memory")
    settings = Settings(_env_file=None)
    assert settings.port == 9000
    assert settings.repository_backend is RepositoryBackend.MEMORY


def test_port_out_of_range():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, port=70000)
