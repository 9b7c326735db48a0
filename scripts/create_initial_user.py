"""Utility script to create the first administrator account."""

from __future__ import annotations

import argparse
import logging
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from lms.application.use_cases.users import create_user
from lms.config import get_settings
from lms.domain.entities import ALL_CAMPUSES, ROLE_ADMIN
from lms.infrastructure.database import Database
from lms.infrastructure.migrations import run_migrations


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial administrator for the LMS API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Full name of the user (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address of the user (default: admin@example.com)",
    )
    parser.add_argument(
        "--campus",
        default=ALL_CAMPUSES,
        help=f"Campus of the user (default: {ALL_CAMPUSES})",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the user. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Run the migrations and create an administrator from the arguments."""

    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("A password is required.")

    database = Database.from_settings(get_settings())
    database.open()
    try:
        run_migrations(database)
        session = database.session()
        try:
            user = create_user(
                session,
                name=args.name,
                role_alias=ROLE_ADMIN,
                email=args.email,
                password=password,
                campus=args.campus,
            )
        except ValueError as exc:
            session.rollback()
            raise SystemExit(f"Could not create the user: {exc}") from exc
        except SQLAlchemyError as exc:
            session.rollback()
            raise SystemExit(f"Could not store the user in the database: {exc}") from exc
        else:
            print(
                "User created:\n"
                f"  ID: {user.id}\n"
                f"  Name: {user.name}\n"
                f"  Email: {user.email}\n"
                f"  Campus: {user.campus}"
            )
        finally:
            session.close()
    finally:
        database.close()


if __name__ == "__main__":
    main()
