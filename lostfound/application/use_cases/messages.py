"""Use cases for private chat messages between users."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError, PermissionDeniedError
from lostfound.application.use_cases.notifications import (
    notify_conversation_deleted,
    notify_message_read,
    notify_message_sent,
)
from lostfound.domain.entities import Conversation, Message, User
from lostfound.infrastructure.realtime import NotificationDispatcher
from lostfound.infrastructure.repositories import MessageRepository, UserRepository
from lostfound.utils import now_utc_naive

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


def validate_message_content(content: str | None) -> str:
    if content is None or not content.strip() or len(content) > MAX_MESSAGE_LENGTH:
        raise ValueError(
            f"Content is required and must be <= {MAX_MESSAGE_LENGTH} chars."
        )
    return content


def send_message(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    sender: User,
    receiver_id: int,
    content: str | None,
) -> Message:
    """Store a message, record the receiver's notification and push both.

    The message is only flushed so the notification metadata can reference
    its id; both rows are committed together when the notification is saved.
    """

    if receiver_id == sender.id:
        raise ValueError("Cannot send to yourself.")
    content = validate_message_content(content)
    if UserRepository(session).get(receiver_id) is None:
        raise NotFoundError("Receiver not found.")

    message = MessageRepository(session).create(
        Message(
            id=None,
            sender_id=sender.id,
            receiver_id=receiver_id,
            content=content,
            created_at=now_utc_naive(),
        ),
        commit=False,
    )
    try:
        notify_message_sent(session, dispatcher, message=message)
    except Exception:
        session.rollback()
        raise
    logger.debug("Message %s sent from %s to %s", message.id, sender.id, receiver_id)
    return message


def get_history(
    session: Session,
    *,
    current_user: User,
    other_user_id: int,
    page: int,
    page_size: int,
) -> list[Message]:
    return MessageRepository(session).list_history(
        current_user.id, other_user_id, page=page, page_size=page_size
    )


def list_conversations(session: Session, *, current_user: User) -> list[Conversation]:
    """Group the user's visible messages by peer, most recent conversation first."""

    messages = MessageRepository(session).list_visible_to(current_user.id)
    latest: dict[int, Message] = {}
    unread: dict[int, int] = {}
    for message in messages:
        other_id = message.other_participant(current_user.id)
        latest[other_id] = message
        unread.setdefault(other_id, 0)
        if message.receiver_id == current_user.id and not message.is_read:
            unread[other_id] += 1

    peers = UserRepository(session).get_map_by_ids(list(latest))
    conversations = [
        Conversation(
            other_user_id=other_id,
            other_user_name=peers[other_id].display_name() if other_id in peers else "User",
            last_message=message.content,
            last_message_at=message.created_at,
            unread_count=unread[other_id],
        )
        for other_id, message in latest.items()
    ]
    conversations.sort(key=lambda conversation: conversation.last_message_at, reverse=True)
    return conversations


def count_unread(session: Session, *, current_user: User) -> int:
    return MessageRepository(session).count_unread(current_user.id)


def _require_message(repository: MessageRepository, message_id: int) -> Message:
    message = repository.get(message_id)
    if message is None:
        raise NotFoundError("Message not found")
    return message


def mark_message_read(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    message_id: int,
    current_user: User,
) -> Message:
    """Mark a received message as read and tell the sender."""

    repository = MessageRepository(session)
    message = _require_message(repository, message_id)
    if message.receiver_id != current_user.id:
        raise PermissionDeniedError("Only the receiver can mark a message as read")
    updated = repository.mark_read(message_id)
    notify_message_read(dispatcher, message=updated)
    return updated


def set_message_deleted(
    session: Session, *, message_id: int, current_user: User, deleted: bool
) -> Message:
    """Hide or restore a message on the caller's side of the conversation."""

    repository = MessageRepository(session)
    message = _require_message(repository, message_id)
    if not message.involves(current_user.id):
        raise PermissionDeniedError("Only participants can change this message")
    return repository.set_deleted_for(message_id, current_user.id, deleted)


def delete_conversation(
    session: Session,
    dispatcher: NotificationDispatcher,
    *,
    current_user: User,
    other_user_id: int,
) -> int:
    hidden = MessageRepository(session).delete_conversation_for(
        current_user.id, other_user_id
    )
    notify_conversation_deleted(
        dispatcher, deleted_by=current_user.id, other_user_id=other_user_id
    )
    return hidden


__all__ = [
    "count_unread",
    "delete_conversation",
    "get_history",
    "list_conversations",
    "mark_message_read",
    "send_message",
    "set_message_deleted",
    "validate_message_content",
]
