"""Helpers inserting rows straight through the repositories."""

from __future__ import annotations

from lostfound.domain.entities import ROLE_USER, Item, User
from lostfound.infrastructure.database import SessionLocal
from lostfound.infrastructure.repositories import (
    ItemRepository,
    RoleRepository,
    UserRepository,
)
from lostfound.infrastructure.security import create_access_token
from lostfound.utils import now_utc_naive

LOST = 1
FOUND = 2


def create_user(
    email: str,
    *,
    role_name: str = ROLE_USER,
    first_name: str | None = "Test",
    last_name: str | None = "User",
) -> User:
    with SessionLocal() as session:
        role = RoleRepository(session).get_by_name(role_name)
        return UserRepository(session).create(
            User(
                id=None,
                google_id=None,
                email=email,
                first_name=first_name,
                last_name=last_name,
                profile_picture=None,
                role=role,
                created_at=now_utc_naive(),
                last_login=None,
            )
        )


def create_item(
    owner: User,
    name: str = "Black wallet",
    *,
    type_id: int = LOST,
    category_id: int = 2,
    status_id: int = 2,
) -> Item:
    with SessionLocal() as session:
        return ItemRepository(session).create(
            Item(
                id=None,
                user_id=owner.id,
                category_id=category_id,
                status_id=status_id,
                type_id=type_id,
                name=name,
                location="Library",
                created_at=now_utc_naive(),
            )
        )


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user)}"}
