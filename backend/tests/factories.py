"""Test factories — user field dicts and JSON bodies shared across test packages."""

import json


def user_fields(**overrides) -> dict[str, str]:
    fields = {
        "first_name": "user1",
        "last_name": "y",
        "nickname": "z",
        "password": "1",
        "email": "a@b.com",
        "country": "Y",
    }
    fields.update(overrides)
    return fields


def user_body(**overrides) -> bytes:
    return json.dumps(user_fields(**overrides)).encode("utf-8")
