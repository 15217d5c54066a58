"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from liftlog.config import get_settings
from liftlog.db.session import get_db  # re-export
from liftlog.models.user import User
from liftlog.services.auth import CredentialService
from liftlog.services.errors import AuthError
from liftlog.services.tokens import NOT_AUTHORIZED, Identity, TokenSigner
from liftlog.services.workouts import WorkoutService

__all__ = [
    "get_db",
    "get_token_signer",
    "get_credential_service",
    "get_workout_service",
    "get_current_identity",
    "require_identity",
]

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@lru_cache(maxsize=1)
def get_token_signer() -> TokenSigner:
    """Token signer built once from settings."""
    return TokenSigner.from_settings(get_settings())


def get_credential_service(
    db: Session = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
) -> CredentialService:
    return CredentialService(db, signer)


def get_workout_service(db: Session = Depends(get_db)) -> WorkoutService:
    return WorkoutService(db)


def get_current_identity(
    db: Session = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
    authorization: str | None = Header(None),
) -> Identity | None:
    """Verify the bearer token and resolve the caller.

    Raises AuthError when the header is missing or the token does not verify.
    Returns None when the token is valid but its user no longer exists.
    """
    if not authorization:
        raise AuthError("Authorization token required")
    if not authorization.startswith(BEARER_PREFIX):
        logger.info("Rejected Authorization header without Bearer scheme")
        raise AuthError(NOT_AUTHORIZED)

    try:
        user_id = signer.verify(authorization[len(BEARER_PREFIX) :].strip())
    except AuthError as exc:
        logger.info("Token verification failed: %s", exc.__cause__ or exc)
        raise

    row = db.query(User.id).filter(User.id == user_id).first()
    if row is None:
        return None
    return Identity(user_id=row.id)


def require_identity(identity: Identity | None = Depends(get_current_identity)) -> Identity:
    """Dependency that requires a caller whose user still exists."""
    if identity is None:
        raise AuthError(NOT_AUTHORIZED)
    return identity
