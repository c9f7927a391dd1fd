"""Pagination Rules — parses optional page-size/page route parameters.

Invariants:
    - Both parameters absent -> unpaginated Pagination()
    - Either parameter present -> both must be present, numeric and >= 1
    - Pure: no IO, raises BadRequestError on any violation
"""

from user_service.core.domain_types import Pagination
from user_service.core.errors import BadRequestError


def parse_pagination(page_size: str | None, page: str | None) -> Pagination:
    """Route parameters -> Pagination (1-based pages)."""
    if page_size is None and page is None:
        return Pagination()

    size_value = _parse_int(page_size, "cannot get pagination limit")
    page_value = _parse_int(page, "cannot get page")

    if size_value < 1:
        raise BadRequestError("page size cannot be less than 1")
    if page_value < 1:
        raise BadRequestError("cannot get page less than 1")

    return Pagination(page_size=size_value, page=page_value)


def _parse_int(raw: str | None, context: str) -> int:
    if raw is None:
        raise BadRequestError(f"{context}: parameter is missing")
    try:
        return int(raw)
    except ValueError:
        raise BadRequestError(f"{context}: {raw!r} is not a number")
