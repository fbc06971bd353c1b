"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError
from lostfound.domain.entities import User
from lostfound.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int, *, include_deleted: bool = False) -> User:
    """Return the requested user or raise an error if it does not exist."""

    repository = UserRepository(session)
    user = repository.get(user_id, include_deleted=include_deleted)
    if user is None:
        raise NotFoundError("User not found")
    return user
