"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every store backend implements UserRepository; services depend on the Protocol only
    - Not-found is signalled with ResourceNotFoundError, store failures with DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: SQL backend does IO; the in-memory backend keeps the
      same signature so services never branch on the backend
"""

from typing import Protocol

from user_service.core.domain_types import Pagination, UserId


class UserRecord(Protocol):
    """Structural contract for stored users returned by any backend."""
    id: int
    first_name: str
    last_name: str
    nickname: str
    password: str
    email: str
    country: str


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def add(self, fields: dict[str, str]) -> UserRecord: ...
    async def delete(self, user_id: UserId) -> None: ...
    async def get(self, user_id: UserId) -> UserRecord: ...
    async def get_all(
        self, filters: dict[str, str | int], pagination: Pagination,
    ) -> list[UserRecord]: ...
    async def update(
        self, user: UserRecord, patch: dict[str, str],
    ) -> UserRecord: ...
