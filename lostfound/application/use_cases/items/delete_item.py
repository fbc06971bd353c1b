"""Use case for soft-deleting an item."""

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError
from lostfound.domain.entities import User
from lostfound.infrastructure.repositories import ItemRepository

from .validators import ensure_can_modify


def delete_item(session: Session, *, item_id: int, acting_user: User) -> None:
    repository = ItemRepository(session)
    item = repository.get(item_id)
    if item is None:
        raise NotFoundError("Item not found")
    ensure_can_modify(item, acting_user)
    repository.soft_delete(item_id, deleted_by=acting_user.id)
