"""User Service — one use case per method: decode, validate, then call the repository.

Invariants:
    - Methods return a result or raise a UserServiceError carrying its HTTP status
    - Request bodies reach the repository only after decode_user_payload (and, on
      create, validate_new_user) succeeded
    - get_all tolerates an empty body (EmptyBodyError) as "no filter"
    - Not-found is 404 for get, update and delete alike

Design Decisions:
    - Service receives raw bytes + Content-Type, not a parsed model: classification of
      malformed input stays in one pure function (core/decode_body.py)
    - Repository injected via the UserRepository Protocol: services never know the backend
"""

import logging

from user_service.core.decode_body import (
    DEFAULT_MAX_BODY_BYTES,
    decode_user_payload,
)
from user_service.core.domain_types import Pagination, UserId
from user_service.core.enforce_pagination import parse_pagination
from user_service.core.enforce_user import (
    extract_filters,
    extract_patch,
    parse_user_id,
    validate_new_user,
)
from user_service.core.errors import EmptyBodyError
from user_service.core.repository_protocols import UserRecord, UserRepository
from user_service.schemas.user import UserPayload

logger = logging.getLogger(__name__)


class UserService:
    """User CRUD use cases."""

    def __init__(
        self,
        repository: UserRepository,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
    ):
        self.repository = repository
        self.max_body_bytes = max_body_bytes

    async def add(
        self, body: bytes, content_type: str | None = None,
    ) -> UserRecord:
        """Create a user from a full JSON record."""
        logger.info("request add a new user")
        payload = self._decode(body, content_type)
        validate_new_user(payload)
        user = await self.repository.add(extract_patch(payload))
        logger.info(
            f"user with ID {user.id} has been added successfully",
            extra={"user_id": user.id},
        )
        return user

    async def delete(self, raw_id: str | None) -> UserId:
        """Delete by route id. Returns the deleted id."""
        logger.info("request delete user")
        user_id = parse_user_id(raw_id)
        await self.repository.delete(user_id)
        return user_id

    async def get(self, raw_id: str | None) -> UserRecord:
        logger.info("request get single user")
        user_id = parse_user_id(raw_id)
        user = await self.repository.get(user_id)
        logger.info(
            f"user with ID {user_id} has been retrieved successfully",
            extra={"user_id": user_id},
        )
        return user

    async def get_all(
        self,
        body: bytes = b"",
        content_type: str | None = None,
        page_size: str | None = None,
        page: str | None = None,
    ) -> list[UserRecord]:
        """List users, optionally filtered by a partial user body and paginated."""
        logger.info("request list users")
        try:
            filter_payload: UserPayload | None = self._decode(body, content_type)
        except EmptyBodyError:
            filter_payload = None

        pagination = parse_pagination(page_size, page)
        filters = extract_filters(filter_payload)
        logger.info(describe_listing(pagination, filters))

        return await self.repository.get_all(filters, pagination)

    async def update(
        self,
        raw_id: str | None,
        body: bytes,
        content_type: str | None = None,
    ) -> UserRecord:
        """Merge the non-empty fields of a partial user onto the stored record."""
        logger.info("request update a user")
        user_id = parse_user_id(raw_id)
        user = await self.repository.get(user_id)
        payload = self._decode(body, content_type)
        user = await self.repository.update(user, extract_patch(payload))
        logger.info(
            f"user with ID {user_id} has been updated successfully",
            extra={"user_id": user_id},
        )
        return user

    def _decode(self, body: bytes, content_type: str | None) -> UserPayload:
        return decode_user_payload(body, content_type, self.max_body_bytes)


def describe_listing(pagination: Pagination, filters: dict) -> str:
    """'try to list users with pagination without filtering' — for the request log."""
    return (
        f"try to list users {_with_without(pagination.enabled)} pagination "
        f"{_with_without(bool(filters))} filtering"
    )


def _with_without(flag: bool) -> str:
    return "with" if flag else "without"
