"""Realtime push helpers for the infrastructure layer."""

from .dispatcher import NotificationDispatcher
from .registry import ConnectionRegistry
from .transport import PushTransport, WebSocketTransport

__all__ = [
    "ConnectionRegistry",
    "NotificationDispatcher",
    "PushTransport",
    "WebSocketTransport",
]
