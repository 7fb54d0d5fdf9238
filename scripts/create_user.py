"""Utility script to create a user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users.create_user import create_user
from app.domain.entities import ADMIN_ROLE_ALIAS, MEMBER_ROLE_ALIAS
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a user for the DevVault notifications service.",
    )
    parser.add_argument("--name", default="Administrator", help="Display name")
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email used to log in (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password; prompted interactively when omitted.",
    )
    parser.add_argument(
        "--role",
        choices=[ADMIN_ROLE_ALIAS, MEMBER_ROLE_ALIAS],
        default=ADMIN_ROLE_ALIAS,
        help="Role assigned to the user (default: admin)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role_alias=args.role,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role.alias}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
