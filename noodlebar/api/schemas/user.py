"""User request/response schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from noodlebar.api.schemas.common import CamelModel


class SignupRequest(CamelModel):
    # optional so the service can answer missing fields with its own message
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class UserUpdateRequest(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class UserResponse(CamelModel):
    """Public view of a user. Has no password field, so the hash never leaves the API."""

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime
