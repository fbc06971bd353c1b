"""Validation helpers shared by the item use cases."""

from sqlalchemy.orm import Session

from lostfound.application.errors import PermissionDeniedError
from lostfound.domain.entities import Item, User
from lostfound.infrastructure.repositories import (
    CategoryRepository,
    ItemTypeRepository,
    StatusRepository,
)


def normalize_item_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Name is required")
    return cleaned


def ensure_lookup_references(
    session: Session,
    *,
    category_id: int | None,
    type_id: int | None,
    status_id: int | None,
) -> None:
    """Reject ids that do not point to an existing lookup value."""

    checks = (
        (category_id, CategoryRepository, "Category"),
        (type_id, ItemTypeRepository, "Item type"),
        (status_id, StatusRepository, "Status"),
    )
    for value_id, repository_class, label in checks:
        if value_id is None:
            continue
        if repository_class(session).get(value_id) is None:
            raise ValueError(f"{label} {value_id} does not exist")


def ensure_can_modify(item: Item, user: User) -> None:
    if user.is_admin():
        return
    if item.user_id is None or item.user_id != user.id:
        raise PermissionDeniedError("Only the owner or an administrator can modify this item")
