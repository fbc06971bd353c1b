"""Use case for listing reported items."""

from sqlalchemy.orm import Session

from lostfound.domain.entities import Item, Page
from lostfound.infrastructure.repositories import ItemFilters, ItemRepository


def list_items(
    session: Session,
    *,
    page: int,
    page_size: int,
    user_id: int | None = None,
    status_id: int | None = None,
    category_id: int | None = None,
    type_id: int | None = None,
    search: str | None = None,
) -> Page[Item]:
    """Return live items, newest first, narrowed by the optional filters."""

    filters = ItemFilters(
        user_id=user_id,
        status_id=status_id,
        category_id=category_id,
        type_id=type_id,
        search=search,
    )
    return ItemRepository(session).list_paged(filters, page=page, page_size=page_size)
