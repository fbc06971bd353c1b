"""Use cases for suggesting and removing lost/found item matches."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError, PermissionDeniedError
from lostfound.application.use_cases.notifications import (
    notify_item_match_created,
    notify_item_match_removed,
)
from lostfound.domain.entities import ItemMatch, User
from lostfound.infrastructure.realtime import NotificationDispatcher
from lostfound.infrastructure.repositories import ItemMatchRepository, ItemRepository
from lostfound.utils import now_utc_naive

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def _owner_ids(session: Session, match: ItemMatch) -> list[int | None]:
    owners = ItemRepository(session).get_owner_map(
        [match.lost_item_id, match.found_item_id]
    )
    return [owners.get(match.lost_item_id), owners.get(match.found_item_id)]


def _is_visible_to(session: Session, match: ItemMatch, user: User) -> bool:
    if user.is_admin() or match.creator_user_id == user.id:
        return True
    return user.id in _owner_ids(session, match)


def create_item_match(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    lost_item_id: int,
    found_item_id: int,
    score: int,
    creator: User,
) -> ItemMatch:
    """Record a suggested match and notify the owners of both items."""

    if lost_item_id == found_item_id:
        raise ValueError("Lost and Found item must be different.")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(f"Score must be between {MIN_SCORE} and {MAX_SCORE}.")

    items = ItemRepository(session)
    if items.get(lost_item_id) is None or items.get(found_item_id) is None:
        raise ValueError("Invalid item ids")

    match = ItemMatchRepository(session).create(
        ItemMatch(
            id=None,
            lost_item_id=lost_item_id,
            found_item_id=found_item_id,
            creator_user_id=creator.id,
            score=score,
            created_at=now_utc_naive(),
        )
    )
    logger.info(
        "User %s matched lost item %s with found item %s",
        creator.id,
        lost_item_id,
        found_item_id,
    )
    notify_item_match_created(
        session, dispatcher, match=match, owner_ids=_owner_ids(session, match)
    )
    return match


def soft_delete_item_match(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    match_id: int,
    acting_user: User,
) -> ItemMatch:
    """Hide a match and tell the item owners it was removed.

    Only administrators, the match creator and the owners of the matched
    items may remove it.
    """

    repository = ItemMatchRepository(session)
    match = repository.get(match_id, include_deleted=True)
    if match is None:
        raise NotFoundError("Item match not found")
    if not _is_visible_to(session, match, acting_user):
        raise PermissionDeniedError("You cannot remove this match")
    if match.is_deleted:
        raise ValueError("Item match already removed.")

    removed = repository.soft_delete(match_id, deleted_by=acting_user.id)
    notify_item_match_removed(
        session,
        dispatcher,
        match=removed,
        owner_ids=_owner_ids(session, removed),
        deleted_by=acting_user.id,
    )
    return removed


def list_matches_for_item(session: Session, item_id: int) -> list[ItemMatch]:
    return ItemMatchRepository(session).list_for_item(item_id)


def list_item_matches(session: Session, *, current_user: User) -> list[ItemMatch]:
    """Return every live match for admins, otherwise only the caller's ones."""

    repository = ItemMatchRepository(session)
    if current_user.is_admin():
        return repository.list_live()
    return repository.list_visible_to(current_user.id)


def get_item_match(session: Session, *, match_id: int, current_user: User) -> ItemMatch:
    match = ItemMatchRepository(session).get(match_id, include_deleted=True)
    if match is None:
        raise NotFoundError("Item match not found")
    if not _is_visible_to(session, match, current_user):
        raise PermissionDeniedError("You cannot view this match")
    return match


__all__ = [
    "create_item_match",
    "get_item_match",
    "list_item_matches",
    "list_matches_for_item",
    "soft_delete_item_match",
]
