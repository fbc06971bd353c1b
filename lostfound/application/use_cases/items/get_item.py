"""Use case for retrieving a single item."""

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError
from lostfound.domain.entities import Item
from lostfound.infrastructure.repositories import ItemRepository


def get_item(session: Session, item_id: int) -> Item:
    item = ItemRepository(session).get(item_id)
    if item is None:
        raise NotFoundError("Item not found")
    return item
