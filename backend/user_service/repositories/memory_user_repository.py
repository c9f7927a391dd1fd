"""In-Memory User Repository — process-local UserRepository for ephemeral deployments and tests.

Invariants:
    - Ids are assigned sequentially from 1 and never reused
    - Callers receive copies: mutating a returned record never touches the store
    - Same errors as the SQL backend (ResourceNotFoundError, DatabaseError)

Design Decisions:
    - Shared across requests (one instance per application): no awaits between read and
      write inside a method, so the asyncio event loop needs no lock
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime

from user_service.core.domain_types import Pagination, UserId
from user_service.core.errors import DatabaseError, ResourceNotFoundError
from user_service.models.user import utcnow

logger = logging.getLogger(__name__)


@dataclass
class StoredUser:
    """Plain record mirroring the users table."""
    id: int
    first_name: str
    last_name: str
    nickname: str
    password: str
    email: str
    country: str
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


class InMemoryUserRepository:
    """UserRepository backed by a dict."""

    def __init__(self):
        self._users: dict[int, StoredUser] = {}
        self._next_id = 1

    async def add(self, fields: dict[str, str]) -> StoredUser:
        user = StoredUser(id=self._next_id, **fields)
        self._users[user.id] = user
        self._next_id += 1
        logger.info("user added to the memory store", extra={"user_id": user.id})
        return replace(user)

    async def delete(self, user_id: UserId) -> None:
        if self._users.pop(user_id, None) is None:
            raise ResourceNotFoundError(f"cannot find user with ID {user_id}")
        logger.info(
            f"user with ID {user_id} has been deleted successfully",
            extra={"user_id": user_id},
        )

    async def get(self, user_id: UserId) -> StoredUser:
        user = self._users.get(user_id)
        if user is None:
            raise ResourceNotFoundError(f"user with ID {user_id} not found")
        return replace(user)

    async def get_all(
        self, filters: dict[str, str | int], pagination: Pagination,
    ) -> list[StoredUser]:
        users = [
            replace(u) for _, u in sorted(self._users.items())
            if all(getattr(u, name) == value for name, value in filters.items())
        ]
        if pagination.enabled:
            users = users[pagination.offset:pagination.offset + pagination.page_size]
        return users

    async def update(
        self, user: StoredUser, patch: dict[str, str],
    ) -> StoredUser:
        stored = self._users.get(user.id)
        if stored is None:
            raise DatabaseError(
                f"there are some problems updating user with ID {user.id}",
                "update",
            )
        updated = replace(stored, **patch, updated_at=utcnow())
        self._users[user.id] = updated
        logger.info(
            f"user with ID {user.id} has been updated successfully",
            extra={"user_id": user.id},
        )
        return replace(updated)
