"""Repositories — UserRepository implementations (shell side of repository_protocols).

Invariants:
    - Only SqlUserRepository touches SQLAlchemy sessions
    - Backends are interchangeable behind core.repository_protocols.UserRepository
"""

from user_service.repositories.memory_user_repository import InMemoryUserRepository
from user_service.repositories.provider import RepositoryProvider
from user_service.repositories.sql_user_repository import SqlUserRepository

__all__ = [
    "InMemoryUserRepository",
    "RepositoryProvider",
    "SqlUserRepository",
]
