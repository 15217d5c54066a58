"""Service-level errors. Each carries the HTTP status it maps to."""

from __future__ import annotations


class LiftLogError(Exception):
    """Base class for errors surfaced to API callers as {"error": message}."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LiftLogError):
    """Bad or missing input, or a business-rule violation."""

    status_code = 400

    def __init__(self, message: str, empty_fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.empty_fields = empty_fields


class ConflictError(LiftLogError):
    """Raised when signing up with an email that is already registered.

    Answered with 400 like every other signup rejection.
    """

    status_code = 400


class AuthError(LiftLogError):
    """Missing or invalid bearer token."""

    status_code = 401


class NotFoundError(LiftLogError):
    """Malformed identifier, or a record that does not exist."""

    status_code = 404
