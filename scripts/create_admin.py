"""Utility script to grant the Admin role to a user, creating the user if needed."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from lostfound.domain.entities import ROLE_ADMIN, User
from lostfound.infrastructure.database import SessionLocal, initialize_database
from lostfound.infrastructure.repositories import RoleRepository, UserRepository
from lostfound.utils import now_utc_naive


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the admin account."""

    parser = argparse.ArgumentParser(
        description="Promote (or create) an administrator of the Lost and Found API.",
    )
    parser.add_argument("--email", required=True, help="Email of the administrator")
    parser.add_argument("--first-name", default=None, help="First name for a new user")
    parser.add_argument("--last-name", default=None, help="Last name for a new user")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        admin_role = RoleRepository(session).get_by_name(ROLE_ADMIN)
        if admin_role is None:
            raise SystemExit("The Admin role is missing from the database.")

        users = UserRepository(session)
        user = users.get_by_email(args.email)
        if user is None:
            user = users.create(
                User(
                    id=None,
                    google_id=None,
                    email=args.email.strip(),
                    first_name=args.first_name,
                    last_name=args.last_name,
                    profile_picture=None,
                    role=admin_role,
                    created_at=now_utc_naive(),
                    last_login=None,
                )
            )
            action = "created"
        else:
            user.role = admin_role
            user = users.update(user)
            action = "promoted"
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the administrator: {exc}") from exc
    else:
        print(f"User {user.id} ({user.email}) {action} as {ROLE_ADMIN}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
