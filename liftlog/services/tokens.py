"""Session tokens: JWT minting/verification and the caller identity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from liftlog.config import Settings
from liftlog.services.errors import AuthError

# JWT configuration
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_DAYS = 3

NOT_AUTHORIZED = "Request is not authorized"


@dataclass(frozen=True)
class Identity:
    """Authenticated caller: the id of an existing User."""

    user_id: uuid.UUID


@dataclass(frozen=True)
class TokenSigner:
    """Signs and verifies session tokens with a fixed secret."""

    secret_key: str
    algorithm: str = ALGORITHM
    expires: timedelta = timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS)

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenSigner:
        return cls(
            secret_key=settings.secret_key,
            expires=timedelta(days=settings.token_expire_days),
        )

    def mint(self, user_id: uuid.UUID) -> str:
        """Create a signed token asserting user_id, valid for self.expires."""
        expire = datetime.now(timezone.utc) + self.expires
        return jwt.encode(
            {"sub": str(user_id), "exp": expire}, self.secret_key, algorithm=self.algorithm
        )

    def verify(self, token: str) -> uuid.UUID:
        """Return the user id asserted by token.

        Raises AuthError on bad signature, expiry, or a malformed payload.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise AuthError(NOT_AUTHORIZED) from exc
        subject = payload.get("sub")
        if not isinstance(subject, str):
            raise AuthError(NOT_AUTHORIZED)
        try:
            return uuid.UUID(subject)
        except ValueError as exc:
            raise AuthError(NOT_AUTHORIZED) from exc
