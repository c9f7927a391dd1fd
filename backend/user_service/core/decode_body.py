"""Request Body Decoding — turns raw JSON bytes into a UserPayload or a classified 4xx error.

Invariants:
    - decode_user_payload is PURE: consumes only the given bytes, no IO, deterministic
    - Check order is fixed: size -> content type -> empty -> encoding -> syntax
      -> single object -> unknown field -> field type
    - Syntax and type errors report a byte offset into the body
    - Type errors point at the top-level key, never at a same-named string inside a value
    - Oversized integer literals and runaway nesting are malformed JSON, never a 500
    - EmptyBodyError is raised only for empty/whitespace bodies (listing tolerates it)

Design Decisions:
    - json.JSONDecoder.raw_decode over json.loads: exposes where the first value ends,
      so trailing content is detected instead of silently rejected as "Extra data"
    - Pydantic validates the decoded dict: unknown keys and type mismatches come from
      one schema (schemas/user.py) instead of hand-written field checks
"""

import json
from json.decoder import scanstring

from pydantic import ValidationError

from user_service.core.errors import (
    BadRequestError,
    EmptyBodyError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
)
from user_service.schemas.user import UserPayload


JSON_MEDIA_TYPE = "application/json"
DEFAULT_MAX_BODY_BYTES: int = 1_048_576  # 1 MiB

_JSON_WHITESPACE = " \t\n\r"
_decoder = json.JSONDecoder()


def decode_user_payload(
    body: bytes,
    content_type: str | None = None,
    max_bytes: int = DEFAULT_MAX_BODY_BYTES,
) -> UserPayload:
    """Decode exactly one JSON object describing a user. Raises BadRequestError family."""
    check_body_size(len(body), max_bytes)
    check_content_type(content_type)
    text = _decode_text(body)
    document = _parse_single_object(text)
    try:
        return UserPayload.model_validate(document)
    except ValidationError as e:
        raise _classify_validation_error(e, text) from e


def check_body_size(size: int, max_bytes: int = DEFAULT_MAX_BODY_BYTES) -> None:
    """Reject bodies above max_bytes. Shared with the streaming reader in the API layer."""
    if size > max_bytes:
        raise PayloadTooLargeError(
            f"Request body must not be larger than {format_size(max_bytes)}",
        )


def check_content_type(content_type: str | None) -> None:
    """A declared Content-Type must be JSON; an absent one is accepted."""
    if not content_type:
        return
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise UnsupportedMediaTypeError()


def format_size(num_bytes: int) -> str:
    """1048576 -> '1MB', 2048 -> '2KB', 100 -> '100 bytes'."""
    if num_bytes >= 1_048_576 and num_bytes % 1_048_576 == 0:
        return f"{num_bytes // 1_048_576}MB"
    if num_bytes >= 1024 and num_bytes % 1024 == 0:
        return f"{num_bytes // 1024}KB"
    return f"{num_bytes} bytes"


# ─── Internals ───────────────────────────────────────────────────

def _decode_text(body: bytes) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BadRequestError(
            f"Request body contains badly-formed JSON (at position {e.start})",
            "MALFORMED_JSON",
        ) from e


def _parse_single_object(text: str) -> dict:
    start = len(text) - len(text.lstrip(_JSON_WHITESPACE))
    if start == len(text):
        raise EmptyBodyError()

    try:
        document, end = _decoder.raw_decode(text, start)
    except json.JSONDecodeError as e:
        raise _syntax_error(e, text) from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals or nesting deeper than the interpreter stack
        raise BadRequestError(
            "Request body contains badly-formed JSON", "MALFORMED_JSON",
        ) from e

    if text[end:].strip(_JSON_WHITESPACE):
        raise BadRequestError(
            "Request body must only contain a single JSON object",
            "MULTIPLE_JSON_VALUES",
        )
    if not isinstance(document, dict):
        raise BadRequestError(
            "Request body must contain a JSON object", "NOT_A_JSON_OBJECT",
        )
    return document


def _syntax_error(exc: json.JSONDecodeError, text: str) -> BadRequestError:
    # A document cut short (EOF mid-value) has no meaningful offset to report
    truncated = (
        exc.pos >= len(text.rstrip(_JSON_WHITESPACE))
        or exc.msg.startswith("Unterminated string")
    )
    if truncated:
        return BadRequestError(
            "Request body contains badly-formed JSON", "MALFORMED_JSON",
        )
    return BadRequestError(
        "Request body contains badly-formed JSON "
        f"(at position {_byte_offset(text, exc.pos)})",
        "MALFORMED_JSON",
    )


def _classify_validation_error(
    exc: ValidationError, text: str,
) -> BadRequestError:
    errors = exc.errors()
    # Unknown fields win over type errors, whatever their order in the body
    unknown = [e for e in errors if e["type"] == "extra_forbidden"]
    if unknown:
        field = _field_name(unknown[0])
        return BadRequestError(
            f'Request body contains unknown field "{field}"', "UNKNOWN_FIELD",
        )

    field = _field_name(errors[0])
    return BadRequestError(
        f'Request body contains an invalid value for the "{field}" field '
        f"(at position {_key_offset(text, field)})",
        "INVALID_FIELD_VALUE",
    )


def _field_name(error: dict) -> str:
    loc = error.get("loc") or ()
    return str(loc[0]) if loc else ""


def _key_offset(text: str, field: str) -> int:
    """Byte offset of the top-level key (last occurrence wins, as in decoding)."""
    offset = _top_level_keys(text).get(field)
    return _byte_offset(text, offset) if offset is not None else 0


def _top_level_keys(text: str) -> dict[str, int]:
    # Only called on text that already decoded into a single object
    keys: dict[str, int] = {}
    pos = _skip_whitespace(text, text.index("{") + 1)
    while text[pos] != "}":
        key, after_key = scanstring(text, pos + 1)
        keys[key] = pos
        colon = _skip_whitespace(text, after_key)
        _, end = _decoder.raw_decode(text, _skip_whitespace(text, colon + 1))
        pos = _skip_whitespace(text, end)
        if text[pos] == ",":
            pos = _skip_whitespace(text, pos + 1)
    return keys


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _JSON_WHITESPACE:
        pos += 1
    return pos


def _byte_offset(text: str, char_index: int) -> int:
    return len(text[:char_index].encode("utf-8"))
