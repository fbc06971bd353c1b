"""Use cases for listing users."""

from sqlalchemy.orm import Session

from lostfound.domain.entities import Page, User
from lostfound.infrastructure.repositories import UserRepository


def list_users(
    session: Session,
    *,
    page: int,
    page_size: int,
    search: str | None = None,
) -> Page[User]:
    """Return active users ordered by id, optionally filtered by ``search``."""

    repository = UserRepository(session)
    return repository.list_paged(page=page, page_size=page_size, search=search)


def list_deleted_users(
    session: Session,
    *,
    page: int,
    page_size: int,
    search: str | None = None,
) -> Page[User]:
    """Return soft-deleted users, earliest deletion first."""

    repository = UserRepository(session)
    return repository.list_paged(
        page=page, page_size=page_size, search=search, deleted=True
    )
