"""Use cases for soft-deleting and restoring users."""

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError
from lostfound.domain.entities import User
from lostfound.infrastructure.repositories import UserRepository


def soft_delete_user(session: Session, *, user_id: int, acting_user: User) -> None:
    """Hide ``user_id`` from the application without removing their data."""

    repository = UserRepository(session)
    user = repository.get(user_id, include_deleted=True)
    if user is None:
        raise NotFoundError("User not found")
    if user.is_deleted:
        raise ValueError("User already deleted.")
    if user.id == acting_user.id:
        raise ValueError("Cannot delete yourself.")
    repository.soft_delete(user_id, deleted_by=acting_user.id)


def restore_user(session: Session, *, user_id: int) -> None:
    repository = UserRepository(session)
    user = repository.get(user_id, include_deleted=True)
    if user is None:
        raise NotFoundError("User not found")
    if not user.is_deleted:
        raise ValueError("User is not deleted.")
    repository.restore(user_id)
