"""Utility helpers to persist domain notifications and push realtime events."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from lostfound.domain.entities import ItemMatch, Message, Notification
from lostfound.infrastructure.realtime import NotificationDispatcher
from lostfound.infrastructure.realtime.events import (
    CONVERSATION_DELETED,
    MESSAGE_READ,
    MESSAGE_SENT,
    RECEIVE_MESSAGE,
    RECEIVE_NOTIFICATION,
    conversation_deleted_payload,
    item_match_deleted_payload,
    item_match_payload,
    message_notification_payload,
    message_read_payload,
    serialize_message,
)
from lostfound.infrastructure.repositories import NotificationRepository
from lostfound.utils import now_utc_naive

logger = logging.getLogger(__name__)


def persist_notification(
    session: Session,
    *,
    user_id: int,
    title: str,
    body: str,
    meta: dict[str, Any] | None = None,
) -> Notification:
    """Store a notification row that the user can later list and mark read."""

    notification = Notification(
        id=None,
        user_id=user_id,
        title=title,
        body=body,
        meta=meta or {},
        is_read=False,
        created_at=now_utc_naive(),
    )
    return NotificationRepository(session).create(notification)


def _distinct_recipients(user_ids: Iterable[int | None]) -> list[int]:
    recipients: list[int] = []
    for user_id in user_ids:
        if user_id and user_id not in recipients:
            recipients.append(user_id)
    return recipients


def notify_item_match_created(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    match: ItemMatch,
    owner_ids: Iterable[int | None],
) -> list[Notification]:
    """Tell the owners of both items that a possible match was suggested."""

    recipients = _distinct_recipients(owner_ids)
    notifications = [
        persist_notification(
            session,
            user_id=recipient,
            title="Possible match found",
            body=(
                f"A possible match (score {match.score}) was suggested between "
                f"items {match.lost_item_id} and {match.found_item_id}."
            ),
            meta={"type": "itemmatch", "itemMatchId": match.id},
        )
        for recipient in recipients
    ]
    dispatcher.dispatch(
        recipients,
        RECEIVE_NOTIFICATION,
        item_match_payload(match),
        acting_user_id=match.creator_user_id,
    )
    return notifications


def notify_item_match_removed(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    match: ItemMatch,
    owner_ids: Iterable[int | None],
    deleted_by: int,
) -> list[Notification]:
    recipients = _distinct_recipients(owner_ids)
    notifications = [
        persist_notification(
            session,
            user_id=recipient,
            title="Match removed",
            body=(
                f"A match between items {match.lost_item_id} and "
                f"{match.found_item_id} was removed."
            ),
            meta={"type": "itemmatch_deleted", "itemMatchId": match.id},
        )
        for recipient in recipients
    ]
    dispatcher.dispatch(
        recipients,
        RECEIVE_NOTIFICATION,
        item_match_deleted_payload(match),
        acting_user_id=deleted_by,
    )
    return notifications


def notify_message_sent(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    message: Message,
) -> Notification:
    """Persist the receiver's notification and push the message to both sides.

    The receiver gets ``ReceiveMessage`` and ``ReceiveNotification``; the
    sender's other tabs get ``MessageSent``.
    """

    notification = persist_notification(
        session,
        user_id=message.receiver_id,
        title="New message",
        body=message.content,
        meta={"messageId": message.id, "fromUserId": message.sender_id},
    )
    message_payload = serialize_message(message)
    dispatcher.dispatch([message.receiver_id], RECEIVE_MESSAGE, message_payload)
    dispatcher.dispatch(
        [message.receiver_id],
        RECEIVE_NOTIFICATION,
        message_notification_payload(notification, message),
        acting_user_id=message.sender_id,
    )
    dispatcher.dispatch([message.sender_id], MESSAGE_SENT, message_payload)
    return notification


def notify_message_read(dispatcher: NotificationDispatcher, *, message: Message) -> None:
    dispatcher.dispatch([message.sender_id], MESSAGE_READ, message_read_payload(message))


def notify_conversation_deleted(
    dispatcher: NotificationDispatcher, *, deleted_by: int, other_user_id: int
) -> None:
    dispatcher.dispatch(
        [other_user_id],
        CONVERSATION_DELETED,
        conversation_deleted_payload(deleted_by),
    )


__all__ = [
    "notify_conversation_deleted",
    "notify_item_match_created",
    "notify_item_match_removed",
    "notify_message_read",
    "notify_message_sent",
    "persist_notification",
]
