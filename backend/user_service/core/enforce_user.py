"""User Rules — pure validation of decoded users and extraction of patches and filters.

Invariants:
    - validate_new_user checks fields in BUSINESS_FIELDS order; first empty field wins
    - Store-managed attributes (id, created_at, updated_at) are rejected on create
    - extract_patch never returns an empty-string value: blank fields are preserved on update
    - parse_user_id only accepts positive integers

Design Decisions:
    - Raise InvalidInputError instead of returning error dicts: the service layer has
      nothing to recover, the global handler writes the 400
    - Field messages kept human-readable ("the user's first name is empty") since they
      reach clients verbatim inside the error envelope
"""

from user_service.core.domain_types import (
    BUSINESS_FIELDS,
    STORE_MANAGED_FIELDS,
    UserField,
    UserId,
)
from user_service.core.errors import BadRequestError, InvalidInputError
from user_service.schemas.user import UserPayload


EMPTY_FIELD_MESSAGES: dict[UserField, str] = {
    UserField.FIRST_NAME: "the user's first name is empty",
    UserField.LAST_NAME: "the user's last name is empty",
    UserField.NICKNAME: "the user's nickname is empty",
    UserField.PASSWORD: "the user's password is empty",
    UserField.EMAIL: "the user's email field is empty",
    UserField.COUNTRY: "the user's country field is empty",
}


def validate_new_user(payload: UserPayload | None) -> None:
    """Rule: a user to create carries all six business fields and nothing store-managed."""
    if payload is None:
        raise InvalidInputError("the user object is empty")

    empty = find_empty_fields(payload)
    if empty:
        raise InvalidInputError(EMPTY_FIELD_MESSAGES[UserField(empty[0])], empty[0])

    for name in STORE_MANAGED_FIELDS:
        if getattr(payload, name) is not None:
            raise InvalidInputError(
                "the user's timestamps are managed by the store and must not be set",
                name,
            )

    if payload.id is not None:
        raise InvalidInputError(
            "the user's ID is assigned by the store and must not be set", "id",
        )


def find_empty_fields(payload: UserPayload) -> list[str]:
    """All empty business fields, in validation order."""
    return [
        field.value for field in BUSINESS_FIELDS
        if not getattr(payload, field.value)
    ]


def extract_patch(payload: UserPayload) -> dict[str, str]:
    """Non-empty business fields of a partial user — the values an update overwrites."""
    return {
        field.value: getattr(payload, field.value)
        for field in BUSINESS_FIELDS
        if getattr(payload, field.value)
    }


def extract_filters(payload: UserPayload | None) -> dict[str, str | int]:
    """Equality filters for listing: id plus the non-empty business fields."""
    if payload is None:
        return {}
    filters: dict[str, str | int] = dict(extract_patch(payload))
    if payload.id:
        filters["id"] = payload.id
    return filters


def parse_user_id(raw: str | None) -> UserId:
    """Route parameter -> UserId. Missing, non-numeric or non-positive ids are a 400."""
    if raw is None or not raw.strip():
        raise BadRequestError("cannot parse ID of the user: ID is missing")
    try:
        value = int(raw)
    except ValueError:
        raise BadRequestError(
            f"cannot parse ID of the user: {raw!r} is not a number",
        )
    if value <= 0:
        raise BadRequestError(
            f"cannot parse ID of the user: {value} is not a positive number",
        )
    return UserId(value)
