"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store-assigned integer key — never negative, never zero
    - BUSINESS_FIELDS order is the validation order (first empty field wins)
    - All valid backends encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: settings and logs serialize them without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Pagination:
    """Listing window. page_size == 0 means unpaginated; pages are 1-based."""
    page_size: int = 0
    page: int = 0

    @property
    def enabled(self) -> bool:
        return self.page_size > 0

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size if self.enabled else 0


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """The six business fields every stored user must carry."""
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    NICKNAME = "nickname"
    PASSWORD = "password"
    EMAIL = "email"
    COUNTRY = "country"


class RepositoryBackend(str, Enum):
    """Store implementations selectable at startup."""
    SQL = "sql"
    MEMORY = "memory"


BUSINESS_FIELDS: tuple[UserField, ...] = tuple(UserField)

STORE_MANAGED_FIELDS: tuple[str, ...] = ("created_at", "updated_at")
