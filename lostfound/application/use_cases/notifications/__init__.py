"""Public helpers for emitting and managing user notifications."""

from .events import (
    notify_conversation_deleted,
    notify_item_match_created,
    notify_item_match_removed,
    notify_message_read,
    notify_message_sent,
    persist_notification,
)
from .manage import (
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_conversation_deleted",
    "notify_item_match_created",
    "notify_item_match_removed",
    "notify_message_read",
    "notify_message_sent",
    "persist_notification",
]
