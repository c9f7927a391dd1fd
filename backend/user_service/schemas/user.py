"""User Schemas — Pydantic models for the JSON wire shape at the API boundary.

Invariants:
    - UserPayload forbids unknown fields and never coerces across JSON types
    - Every UserPayload field is optional: create, patch and filter share one shape
    - UserResponse is built from ORM objects (from_attributes)

Design Decisions:
    - Strict per-field types over strict model mode: timestamps still parse from
      ISO strings, business fields reject numbers and booleans
    - null treated as absent (matches "leave the stored value alone" semantics)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class UserPayload(BaseModel):
    """Inbound user body — full record on create, partial on update/filter."""
    model_config = ConfigDict(extra="forbid")

    id: StrictInt | None = None
    first_name: StrictStr | None = None
    last_name: StrictStr | None = None
    nickname: StrictStr | None = None
    password: StrictStr | None = None
    email: StrictStr | None = None
    country: StrictStr | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserResponse(BaseModel):
    """Stored user as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    nickname: str
    password: str
    email: str
    country: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageResponse(BaseModel):
    """Plain message envelope — deletion confirmations and error bodies."""
    message: str
