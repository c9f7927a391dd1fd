"""SQL User Repository — CRUD on the users table through an AsyncSession.

Invariants:
    - One instance per request, bound to that request's session
    - Every mutation commits before returning; failures roll back and raise DatabaseError
    - get/delete raise ResourceNotFoundError when no row matches the id
    - get_all orders by id ascending: pagination is stable across calls

Design Decisions:
    - update() uses an UPDATE statement over attribute assignment: rowcount tells a
      concurrently deleted row apart from a successful write
    - Store error details are logged, not returned: messages carry operation + id only
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core.domain_types import Pagination, UserId
from user_service.core.errors import DatabaseError, ResourceNotFoundError
from user_service.models.user import User, utcnow

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by SQLAlchemy (SQLite by default)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, fields: dict[str, str]) -> User:
        """Insert a new user; id and timestamps are filled by the store."""
        user = User(**fields)
        self.db.add(user)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed adding a new user: {e}")
            raise DatabaseError("error saving user", "insert")
        await self.db.refresh(user)
        logger.info("user added to the database", extra={"user_id": user.id})
        return user

    async def delete(self, user_id: UserId) -> None:
        user = await self.db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError(f"cannot find user with ID {user_id}")

        try:
            await self.db.delete(user)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"error while deleting user with ID {user_id}: {e}",
                extra={"user_id": user_id},
            )
            raise DatabaseError(
                f"error while deleting user with ID {user_id}", "delete",
            )
        logger.info(
            f"user with ID {user_id} has been deleted successfully",
            extra={"user_id": user_id},
        )

    async def get(self, user_id: UserId) -> User:
        user = await self.db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError(f"user with ID {user_id} not found")
        return user

    async def get_all(
        self, filters: dict[str, str | int], pagination: Pagination,
    ) -> list[User]:
        """List users matching every filter (equality), optionally one page."""
        query = select(User).order_by(User.id)
        for name, value in filters.items():
            query = query.where(getattr(User, name) == value)
        if pagination.enabled:
            query = query.limit(pagination.page_size).offset(pagination.offset)

        result = await self.db.execute(query)
        users = list(result.scalars().all())
        logger.info(f"{len(users)} user(s) listed from the database")
        return users

    async def update(self, user: User, patch: dict[str, str]) -> User:
        """Write the patch onto the stored row and return the refreshed record."""
        statement = (
            update(User)
            .where(User.id == user.id)
            .values(**patch, updated_at=utcnow())
        )
        try:
            result = await self.db.execute(statement)
            if result.rowcount == 0:
                await self.db.rollback()
                raise DatabaseError(
                    f"there are some problems updating user with ID {user.id}",
                    "update",
                )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"error while updating user with ID {user.id}: {e}",
                extra={"user_id": user.id},
            )
            raise DatabaseError(
                f"there are some problems updating user with ID {user.id}",
                "update",
            )
        await self.db.refresh(user)
        logger.info(
            f"user with ID {user.id} has been updated successfully",
            extra={"user_id": user.id},
        )
        return user
