"""Use case for changing the role assigned to a user."""

from dataclasses import replace

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError
from lostfound.domain.entities import User
from lostfound.infrastructure.repositories import RoleRepository, UserRepository


def update_user_role(
    session: Session, *, user_id: int, role_name: str, acting_user: User
) -> User:
    """Assign the role named ``role_name`` to ``user_id``.

    Administrators cannot change their own role, which keeps at least the
    acting administrator in place.
    """

    if not role_name or not role_name.strip():
        raise ValueError("RoleName is required.")
    if user_id == acting_user.id:
        raise ValueError("You cannot change your own role.")

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User not found")

    role = RoleRepository(session).get_by_name(role_name)
    if role is None:
        raise ValueError("Role not found.")

    return repository.update(replace(user, role=role))
