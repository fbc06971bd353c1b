"""Routes for suggesting and removing lost/found item matches."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from lostfound.application.use_cases.item_matches import (
    create_item_match as create_item_match_uc,
    get_item_match as get_item_match_uc,
    list_item_matches as list_item_matches_uc,
    list_matches_for_item as list_matches_for_item_uc,
    soft_delete_item_match as soft_delete_item_match_uc,
)
from lostfound.domain.entities import ItemMatch, User
from lostfound.infrastructure.database import get_db
from lostfound.infrastructure.realtime import NotificationDispatcher
from lostfound.interfaces.api.dependencies import (
    get_current_user,
    get_notification_dispatcher,
)
from lostfound.interfaces.api.routes_helpers import http_error
from lostfound.interfaces.api.schemas import ItemMatchCreate, ItemMatchRead

router = APIRouter(prefix="/api/item-matches", tags=["item-matches"])


def _to_read_model(match: ItemMatch) -> ItemMatchRead:
    return ItemMatchRead(
        id=match.id,
        lost_item_id=match.lost_item_id,
        found_item_id=match.found_item_id,
        creator_user_id=match.creator_user_id,
        score=match.score,
        is_deleted=match.is_deleted,
        created_at=match.created_at,
    )


@router.post("", response_model=ItemMatchRead, status_code=status.HTTP_201_CREATED)
def create_item_match(
    match_in: ItemMatchCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Suggest a match and notify the owners of both items."""

    try:
        match = create_item_match_uc(
            db,
            dispatcher,
            lost_item_id=match_in.lost_item_id,
            found_item_id=match_in.found_item_id,
            score=match_in.score,
            creator=current_user,
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    response.headers["Location"] = f"/api/item-matches/{match.id}"
    return _to_read_model(match)


@router.post("/{match_id}/soft-delete", status_code=status.HTTP_204_NO_CONTENT)
def soft_delete_item_match(
    match_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    try:
        soft_delete_item_match_uc(
            db, dispatcher, match_id=match_id, acting_user=current_user
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/item/{item_id}", response_model=list[ItemMatchRead])
def list_matches_for_item(item_id: int, db: Session = Depends(get_db)):
    """Return the live matches involving ``item_id``. No authentication needed."""

    return [_to_read_model(match) for match in list_matches_for_item_uc(db, item_id)]


@router.get("", response_model=list[ItemMatchRead])
def list_item_matches(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    matches = list_item_matches_uc(db, current_user=current_user)
    return [_to_read_model(match) for match in matches]


@router.get("/{match_id}", response_model=ItemMatchRead)
def read_item_match(
    match_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        match = get_item_match_uc(db, match_id=match_id, current_user=current_user)
    except ValueError as exc:
        raise http_error(exc) from exc
    return _to_read_model(match)
