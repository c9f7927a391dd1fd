"""Enforce User tests — required fields, store-managed fields, patches and ids.

Tests cover:
    - validate_new_user: fixed field order, first empty field wins
    - Store-managed id/timestamps rejected on create
    - extract_patch / extract_filters keep only non-empty values
    - parse_user_id: missing, non-numeric, non-positive
"""

from datetime import datetime, timezone

import pytest

from user_service.core.enforce_user import (
    EMPTY_FIELD_MESSAGES,
    extract_filters,
    extract_patch,
    find_empty_fields,
    parse_user_id,
    validate_new_user,
)
from user_service.core.domain_types import BUSINESS_FIELDS, UserField
from user_service.core.errors import BadRequestError, InvalidInputError
from user_service.schemas.user import UserPayload


FULL_USER = {
    "first_name": "user1",
    "last_name": "y",
    "nickname": "z",
    "password": "1",
    "email": "a@b.com",
    "country": "Y",
}


def _payload(**overrides) -> UserPayload:
    return UserPayload(**{**FULL_USER, **overrides})


# -- validate_new_user --------------------------------------------------------

def test_complete_user_is_valid():
    validate_new_user(_payload())


def test_missing_user_object():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(None)
    assert exc_info.value.message == "the user object is empty"


@pytest.mark.parametrize("field", list(UserField))
def test_single_empty_field_is_named(field):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(_payload(**{field.value: ""}))
    assert exc_info.value.message == EMPTY_FIELD_MESSAGES[field]
    assert exc_info.value.field == field.value
    assert exc_info.value.http_status == 400


@pytest.mark.parametrize("field", list(UserField))
def test_absent_field_counts_as_empty(field):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(_payload(**{field.value: None}))
    assert exc_info.value.field == field.value


def test_first_empty_field_wins():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(_payload(nickname="", country="", last_name=""))
    assert exc_info.value.message == "the user's last name is empty"


def test_field_messages():
    assert EMPTY_FIELD_MESSAGES[UserField.FIRST_NAME] == "the user's first name is empty"
    assert EMPTY_FIELD_MESSAGES[UserField.EMAIL] == "the user's email field is empty"
    assert EMPTY_FIELD_MESSAGES[UserField.COUNTRY] == "the user's country field is empty"


def test_client_supplied_id_is_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(_payload(id=5))
    assert exc_info.value.field == "id"


def test_client_supplied_timestamp_is_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(_payload(created_at=datetime.now(timezone.utc)))
    assert exc_info.value.field == "created_at"


def test_empty_field_reported_before_store_managed_fields():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(_payload(id=5, first_name=""))
    assert exc_info.value.field == "first_name"


def test_find_empty_fields_in_validation_order():
    payload = UserPayload(nickname="z", email="a@b.com")
    assert find_empty_fields(payload) == [
        "first_name", "last_name", "password", "country",
    ]
    assert find_empty_fields(_payload()) == []


def test_business_fields_order():
    assert [f.value for f in BUSINESS_FIELDS] == [
        "first_name", "last_name", "nickname", "password", "email", "country",
    ]


# -- extract_patch / extract_filters -----------------------------------------

def test_patch_keeps_only_non_empty_fields():
    payload = UserPayload(first_name="new", last_name="", nickname=None)
    assert extract_patch(payload) == {"first_name": "new"}


def test_patch_ignores_id_and_timestamps():
    payload = UserPayload(id=3, created_at=datetime.now(timezone.utc))
    assert extract_patch(payload) == {}


def test_filters_include_id():
    payload = UserPayload(id=3, country="UK")
    assert extract_filters(payload) == {"country": "UK", "id": 3}


def test_filters_skip_zero_id():
    assert extract_filters(UserPayload(id=0)) == {}


def test_no_filter_payload_means_no_filters():
    assert extract_filters(None) == {}


# -- parse_user_id ------------------------------------------------------------

def test_parse_valid_id():
    assert parse_user_id("42") == 42


@pytest.mark.parametrize("raw", [None, "", "  "])
def test_missing_id(raw):
    with pytest.raises(BadRequestError) as exc_info:
        parse_user_id(raw)
    assert exc_info.value.message == "cannot parse ID of the user: ID is missing"


def test_non_numeric_id():
    with pytest.raises(BadRequestError) as exc_info:
        parse_user_id("abc")
    assert exc_info.value.message == (
        "cannot parse ID of the user: 'abc' is not a number"
    )


@pytest.mark.parametrize("raw", ["0", "-3"])
def test_non_positive_id(raw):
    with pytest.raises(BadRequestError) as exc_info:
        parse_user_id(raw)
    assert "is not a positive number" in exc_info.value.message


def test_validation_reports_first_of_find_empty_fields():
    payload = _payload(password="", country="")
    assert find_empty_fields(payload) == ["password", "country"]
    with pytest.raises(InvalidInputError) as exc_info:
        validate_new_user(payload)
    assert exc_info.value.field == "password"
