"""Domain entities exposed by the application."""

from .item import Item
from .item_match import ItemMatch
from .lookup import Category, ItemType, LookupValue, Status
from .message import Conversation, Message
from .notification import Notification
from .page import Page
from .role import ROLE_ADMIN, ROLE_MODERATOR, ROLE_USER, Role
from .user import User

__all__ = [
    "Category",
    "Conversation",
    "Item",
    "ItemMatch",
    "ItemType",
    "LookupValue",
    "Message",
    "Notification",
    "Page",
    "ROLE_ADMIN",
    "ROLE_MODERATOR",
    "ROLE_USER",
    "Role",
    "Status",
    "User",
]
