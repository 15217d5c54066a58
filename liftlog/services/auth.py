"""Authentication service: signup, login and session tokens."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from liftlog.models.user import User
from liftlog.services.errors import ConflictError, ValidationError
from liftlog.services.tokens import Identity, TokenSigner

logger = logging.getLogger(__name__)

# Strong password policy
MIN_PASSWORD_LENGTH = 8
_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[ !-/:-@\[-`{-~]")  # ASCII punctuation and space


def is_strong_password(password: str) -> bool:
    """True when password has 8+ chars with a lowercase, uppercase, digit and symbol."""
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and _LOWER.search(password) is not None
        and _UPPER.search(password) is not None
        and _DIGIT.search(password) is not None
        and _SYMBOL.search(password) is not None
    )


def is_valid_email(email: str) -> bool:
    """Syntactic check only; no DNS lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful signup or login."""

    identity: Identity
    email: str
    token: str


class CredentialService:
    """Creates and verifies user credentials and issues session tokens."""

    def __init__(self, db: Session, signer: TokenSigner) -> None:
        self.db = db
        self.signer = signer

    def signup(self, email: str | None, password: str | None) -> AuthResult:
        """Register a new user and return a token for it.

        Raises ValidationError for missing fields, a malformed email or a weak
        password, and ConflictError when the email is already registered.
        """
        if not email or not password:
            raise ValidationError("All fields must be filled")
        if not is_valid_email(email):
            raise ValidationError("Email not valid")

        email = normalize_email(email)
        if self._find_user(email) is not None:
            raise ConflictError("Email already in use")
        if not is_strong_password(password):
            raise ValidationError("Password not strong enough")

        user = User(email=email)
        user.set_password(password)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise ConflictError("Email already in use") from None
        self.db.refresh(user)
        logger.info("User signed up: id=%s", user.id)
        return self._issue(user)

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """Verify credentials and return a fresh token."""
        if not email or not password:
            raise ValidationError("All fields must be filled")

        user = self._find_user(normalize_email(email))
        if user is None:
            raise ValidationError("Incorrect email")
        if not user.verify_password(password):
            raise ValidationError("Incorrect password")
        return self._issue(user)

    def _find_user(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def _issue(self, user: User) -> AuthResult:
        return AuthResult(
            identity=Identity(user_id=user.id),
            email=user.email,
            token=self.signer.mint(user.id),
        )
