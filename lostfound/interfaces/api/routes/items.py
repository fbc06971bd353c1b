"""Routes for reporting and browsing lost and found items."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from lostfound.application.use_cases.items import (
    create_item as create_item_uc,
    delete_item as delete_item_uc,
    get_item as get_item_uc,
    list_items as list_items_uc,
    update_item as update_item_uc,
)
from lostfound.domain.entities import Item, Page, User
from lostfound.infrastructure.database import get_db
from lostfound.interfaces.api.dependencies import get_current_user
from lostfound.interfaces.api.routes_helpers import http_error, normalize_paging
from lostfound.interfaces.api.schemas import (
    ItemCreate,
    ItemCreated,
    ItemRead,
    ItemUpdate,
    PageRead,
)

router = APIRouter(prefix="/api/items", tags=["items"])


def item_to_schema(item: Item) -> ItemRead:
    return ItemRead(
        id=item.id,
        name=item.name,
        description=item.description,
        location=item.location,
        date_lost_found=item.date_lost_found,
        created_at=item.created_at,
        updated_at=item.updated_at,
        user_id=item.user_id,
        category_id=item.category_id,
        type_id=item.type_id,
        status_id=item.status_id,
        user_name=item.user_name,
        category_name=item.category_name,
        type_name=item.type_name,
        status_name=item.status_name,
    )


def item_page_to_schema(page: Page[Item]) -> PageRead[ItemRead]:
    return PageRead[ItemRead](
        total=page.total,
        page=page.page,
        page_size=page.page_size,
        items=[item_to_schema(item) for item in page.items],
    )


@router.get("", response_model=PageRead[ItemRead])
def list_items(
    page: int = 1,
    page_size: int = Query(20, alias="pageSize"),
    status_id: int | None = Query(None, alias="statusId"),
    category_id: int | None = Query(None, alias="categoryId"),
    type_id: int | None = Query(None, alias="typeId"),
    q: str | None = None,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Return live items, newest first."""

    page, page_size = normalize_paging(page, page_size)
    result = list_items_uc(
        db,
        page=page,
        page_size=page_size,
        status_id=status_id,
        category_id=category_id,
        type_id=type_id,
        search=q,
    )
    return item_page_to_schema(result)


@router.get("/{item_id}", response_model=ItemRead)
def read_item(
    item_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    try:
        item = get_item_uc(db, item_id)
    except ValueError as exc:
        raise http_error(exc) from exc
    return item_to_schema(item)


@router.post("", response_model=ItemCreated, status_code=status.HTTP_201_CREATED)
def create_item(
    item_in: ItemCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Report a new item owned by the caller."""

    try:
        item = create_item_uc(
            db,
            owner=current_user,
            name=item_in.name,
            description=item_in.description,
            location=item_in.location,
            date_lost_found=item_in.date_lost_found,
            category_id=item_in.category_id,
            type_id=item_in.type_id,
            status_id=item_in.status_id,
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    response.headers["Location"] = f"/api/items/{item.id}"
    return ItemCreated(id=item.id)


@router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_item(
    item_id: int,
    item_in: ItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        update_item_uc(
            db,
            item_id=item_id,
            acting_user=current_user,
            name=item_in.name,
            description=item_in.description,
            location=item_in.location,
            date_lost_found=item_in.date_lost_found,
            category_id=item_in.category_id,
            type_id=item_in.type_id,
            status_id=item_in.status_id,
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Soft-delete an item owned by the caller (or any item for admins)."""

    try:
        delete_item_uc(db, item_id=item_id, acting_user=current_user)
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
