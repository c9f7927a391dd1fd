"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a users.db in the working directory
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
