"""Use case for reporting a new item."""

from datetime import datetime

from sqlalchemy.orm import Session

from lostfound.domain.entities import Item, User
from lostfound.infrastructure.repositories import ItemRepository
from lostfound.utils import now_utc_naive

from .validators import ensure_lookup_references, normalize_item_name


def create_item(
    session: Session,
    *,
    owner: User,
    name: str,
    description: str | None = None,
    location: str | None = None,
    date_lost_found: datetime | None = None,
    category_id: int | None = None,
    type_id: int | None = None,
    status_id: int | None = None,
) -> Item:
    """Persist a new item owned by ``owner``."""

    cleaned_name = normalize_item_name(name)
    ensure_lookup_references(
        session, category_id=category_id, type_id=type_id, status_id=status_id
    )
    item = Item(
        id=None,
        user_id=owner.id,
        category_id=category_id,
        status_id=status_id,
        type_id=type_id,
        name=cleaned_name,
        description=description,
        location=location,
        date_lost_found=date_lost_found,
        created_at=now_utc_naive(),
    )
    return ItemRepository(session).create(item)
