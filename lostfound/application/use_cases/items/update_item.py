"""Use case for editing an existing item."""

from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError
from lostfound.domain.entities import Item, User
from lostfound.infrastructure.repositories import ItemRepository

from .validators import ensure_can_modify, ensure_lookup_references, normalize_item_name


def update_item(
    session: Session,
    *,
    item_id: int,
    acting_user: User,
    name: str | None = None,
    description: str | None = None,
    location: str | None = None,
    date_lost_found: datetime | None = None,
    category_id: int | None = None,
    type_id: int | None = None,
    status_id: int | None = None,
) -> Item:
    """Apply the provided fields to ``item_id``; ``None`` keeps the stored value."""

    repository = ItemRepository(session)
    current = repository.get(item_id)
    if current is None:
        raise NotFoundError("Item not found")
    ensure_can_modify(current, acting_user)
    ensure_lookup_references(
        session, category_id=category_id, type_id=type_id, status_id=status_id
    )

    updated = replace(
        current,
        name=normalize_item_name(name) if name is not None else current.name,
        description=description if description is not None else current.description,
        location=location if location is not None else current.location,
        date_lost_found=(
            date_lost_found if date_lost_found is not None else current.date_lost_found
        ),
        category_id=category_id if category_id is not None else current.category_id,
        type_id=type_id if type_id is not None else current.type_id,
        status_id=status_id if status_id is not None else current.status_id,
    )
    return repository.update(updated)
