"""Request Dependencies — FastAPI providers for the body, the repository and the service.

Invariants:
    - Everything is read from app.state (built by main.create_app); no module-level state
    - read_body stops consuming the stream as soon as max_body_bytes is crossed
    - One UserService per request, bound to that request's repository
"""

from typing import AsyncIterator

from fastapi import Depends, Request

from user_service.config import Settings
from user_service.core.decode_body import check_body_size
from user_service.core.repository_protocols import UserRepository
from user_service.services.user_service import UserService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_body(
    request: Request, settings: Settings = Depends(get_app_settings),
) -> bytes:
    """Raw request body, bounded by settings.max_body_bytes (413 beyond it)."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit():
        check_body_size(int(declared), settings.max_body_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        check_body_size(len(body), settings.max_body_bytes)
    return bytes(body)


async def get_user_repository(
    request: Request,
) -> AsyncIterator[UserRepository]:
    async with request.app.state.repository_provider.repository() as repository:
        yield repository


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
) -> UserService:
    return UserService(repository, max_body_bytes=settings.max_body_bytes)
