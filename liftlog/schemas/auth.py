"""Authentication schemas."""

from __future__ import annotations

from pydantic import BaseModel


class AuthRequest(BaseModel):
    """Signup/login credentials.

    Both fields are optional here so the service can answer missing input
    with its own message instead of a schema error.
    """

    email: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    """Returned by signup and login."""

    email: str
    token: str
