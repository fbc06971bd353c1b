"""Event names and payload builders for the push channel."""

from __future__ import annotations

from typing import Any

from lostfound.domain.entities import ItemMatch, Message, Notification
from lostfound.utils import isoformat_or_none, now_utc

RECEIVE_MESSAGE = "ReceiveMessage"
RECEIVE_NOTIFICATION = "ReceiveNotification"
MESSAGE_SENT = "MessageSent"
MESSAGE_READ = "MessageRead"
CONVERSATION_DELETED = "ConversationDeleted"


def serialize_message(message: Message) -> dict[str, Any]:
    return {
        "id": message.id,
        "senderId": message.sender_id,
        "receiverId": message.receiver_id,
        "content": message.content,
        "createdAt": isoformat_or_none(message.created_at),
        "isRead": message.is_read,
        "readAt": isoformat_or_none(message.read_at),
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    return {
        "id": notification.id,
        "userId": notification.user_id,
        "title": notification.title,
        "body": notification.body,
        "metaJson": dict(notification.meta or {}),
        "isRead": notification.is_read,
        "createdAt": isoformat_or_none(notification.created_at),
    }


def message_read_payload(message: Message) -> dict[str, Any]:
    return {"messageId": message.id, "readAt": isoformat_or_none(message.read_at)}


def message_notification_payload(
    notification: Notification, message: Message
) -> dict[str, Any]:
    """Stored chat notification plus the fields clients use to route it."""

    payload = serialize_notification(notification)
    payload.update({"type": "message", "messageId": message.id})
    return payload


def item_match_payload(match: ItemMatch) -> dict[str, Any]:
    return {
        "type": "itemmatch",
        "itemMatchId": match.id,
        "lostItemId": match.lost_item_id,
        "foundItemId": match.found_item_id,
        "score": match.score,
    }


def item_match_deleted_payload(match: ItemMatch) -> dict[str, Any]:
    return {"type": "itemmatch_deleted", "itemMatchId": match.id}


def conversation_deleted_payload(deleting_user_id: int) -> dict[str, Any]:
    return {"otherUserId": deleting_user_id}


def ephemeral_message_payload(
    sender_id: int, receiver_id: int, content: str
) -> dict[str, Any]:
    """Payload of a hub-relayed message that is never stored."""

    return {
        "senderId": sender_id,
        "receiverId": receiver_id,
        "content": content,
        "createdAt": isoformat_or_none(now_utc()),
    }


__all__ = [
    "CONVERSATION_DELETED",
    "MESSAGE_READ",
    "MESSAGE_SENT",
    "RECEIVE_MESSAGE",
    "RECEIVE_NOTIFICATION",
    "conversation_deleted_payload",
    "ephemeral_message_payload",
    "item_match_deleted_payload",
    "item_match_payload",
    "message_notification_payload",
    "message_read_payload",
    "serialize_message",
    "serialize_notification",
]
