"""User ORM — persists the single entity served by this service.

Invariants:
    - id is an autoincrement integer primary key, assigned by the store on insert and
      never reused after a delete (sqlite_autoincrement)
    - The six business columns are NOT NULL (emptiness is checked before persistence)
    - created_at set on insert; updated_at set on insert and refreshed on every UPDATE

Design Decisions:
    - Plain String columns without length limits: SQLite ignores VARCHAR lengths anyway
    - Python-side timestamp defaults over server_default: values are available on the
      instance right after flush, without an extra SELECT
    - password stored as given (plaintext) — known defect, not addressed here
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_service.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Stored user record."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    nickname: Mapped[str] = mapped_column(String, nullable=False)
    password: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
    country: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=utcnow, onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} nickname={self.nickname!r}>"
