"""User Routes — CRUD endpoints for the single user resource.

Invariants:
    - Handlers pass raw body bytes + Content-Type to UserService; decoding happens there
    - Success payloads go through api/responses.json_response; errors are raised and
      written by api/error_handlers.py
    - Path parameters are taken as strings so malformed ids/pages surface as 400 envelopes

Design Decisions:
    - Filters for GET /users travel in the request body (partial user object), matching
      the create/update payload shape
    - POST /user/{id} is the update route (partial merge), not PUT/PATCH
"""

import logging

from fastapi import APIRouter, Depends, Header

from user_service.api.dependencies import get_user_service, read_body
from user_service.api.responses import json_response
from user_service.schemas.user import MessageResponse, UserResponse
from user_service.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get("/users")
async def list_users(
    body: bytes = Depends(read_body),
    content_type: str | None = Header(None),
    service: UserService = Depends(get_user_service),
):
    """All users, optionally filtered by the fields of a partial user body."""
    users = await service.get_all(body, content_type)
    return _users_response(users)


@router.get("/users/{page_size}/{page}")
async def list_users_paginated(
    page_size: str,
    page: str,
    body: bytes = Depends(read_body),
    content_type: str | None = Header(None),
    service: UserService = Depends(get_user_service),
):
    """One page of users; page is 1-based."""
    users = await service.get_all(body, content_type, page_size, page)
    return _users_response(users)


@router.post("/user")
async def create_user(
    body: bytes = Depends(read_body),
    content_type: str | None = Header(None),
    service: UserService = Depends(get_user_service),
):
    user = await service.add(body, content_type)
    return json_response(UserResponse.model_validate(user))


@router.post("/user/{user_id}")
async def update_user(
    user_id: str,
    body: bytes = Depends(read_body),
    content_type: str | None = Header(None),
    service: UserService = Depends(get_user_service),
):
    """Merge non-empty fields of the body onto the stored user."""
    user = await service.update(user_id, body, content_type)
    return json_response(UserResponse.model_validate(user))


@router.get("/user/{user_id}")
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    user = await service.get(user_id)
    return json_response(UserResponse.model_validate(user))


@router.delete("/user/{user_id}")
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    deleted_id = await service.delete(user_id)
    message = f"user with ID {deleted_id} has been deleted successfully"
    logger.info(message, extra={"user_id": deleted_id})
    return json_response(MessageResponse(message=message))


def _users_response(users):
    logger.info(f"{len(users)} users have been retrieved successfully")
    return json_response([UserResponse.model_validate(u) for u in users])
