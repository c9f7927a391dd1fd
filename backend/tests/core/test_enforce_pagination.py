"""Enforce Pagination tests — page-size/page route parameters."""

import pytest

from user_service.core.domain_types import Pagination
from user_service.core.enforce_pagination import parse_pagination
from user_service.core.errors import BadRequestError


def _message(page_size, page) -> str:
    with pytest.raises(BadRequestError) as exc_info:
        parse_pagination(page_size, page)
    return exc_info.value.message


def test_no_parameters_means_unpaginated():
    pagination = parse_pagination(None, None)
    assert pagination == Pagination()
    assert not pagination.enabled


def test_valid_parameters():
    pagination = parse_pagination("10", "3")
    assert pagination == Pagination(page_size=10, page=3)
    assert pagination.enabled
    assert pagination.offset == 20


def test_first_page_has_zero_offset():
    assert parse_pagination("5", "1").offset == 0


def test_page_size_below_one():
    assert _message("0", "1") == "page size cannot be less than 1"


def test_page_below_one():
    assert _message("10", "0") == "cannot get page less than 1"


def test_non_numeric_page_size():
    assert _message("ten", "1") == "cannot get pagination limit: 'ten' is not a number"


def test_non_numeric_page():
    assert _message("10", "first") == "cannot get page: 'first' is not a number"


def test_only_one_parameter_present():
    assert _message("10", None) == "cannot get page: parameter is missing"
    assert _message(None, "2") == "cannot get pagination limit: parameter is missing"
