"""Register a LiftLog user from the command line.

Usage:
    python -m liftlog.scripts.create_user --email you@example.com --password <password>
"""

from __future__ import annotations

import argparse
import sys

from liftlog.config import get_settings
from liftlog.db.session import SessionLocal
from liftlog.services.auth import CredentialService
from liftlog.services.errors import LiftLogError
from liftlog.services.tokens import TokenSigner


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create a LiftLog user")
    parser.add_argument("--email", required=True, help="Email for the new user")
    parser.add_argument("--password", required=True, help="Password for the new user")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        service = CredentialService(db, TokenSigner.from_settings(get_settings()))
        try:
            result = service.signup(args.email, args.password)
        except LiftLogError as exc:
            print(f"Could not create user '{args.email}': {exc.message}")
            sys.exit(1)
        print(f"User '{result.email}' created successfully (id={result.identity.user_id}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
