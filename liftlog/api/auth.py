"""User signup and login routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from liftlog.api.deps import get_credential_service
from liftlog.schemas.auth import AuthRequest, AuthResponse
from liftlog.services.auth import CredentialService

router = APIRouter()


@router.post("/signup", response_model=AuthResponse)
def signup(
    body: AuthRequest | None = None,
    credentials: CredentialService = Depends(get_credential_service),
) -> AuthResponse:
    """Register a user and return a session token."""
    body = body or AuthRequest()
    result = credentials.signup(body.email, body.password)
    return AuthResponse(email=result.email, token=result.token)


@router.post("/login", response_model=AuthResponse)
def login(
    body: AuthRequest | None = None,
    credentials: CredentialService = Depends(get_credential_service),
) -> AuthResponse:
    """Check credentials and return a fresh session token."""
    body = body or AuthRequest()
    result = credentials.login(body.email, body.password)
    return AuthResponse(email=result.email, token=result.token)
