"""Repository implementations for infrastructure layer."""

from .item_match_repository import ItemMatchRepository
from .item_repository import ItemFilters, ItemRepository
from .lookup_repository import (
    CategoryRepository,
    ItemTypeRepository,
    LookupRepository,
    StatusRepository,
)
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "ItemFilters",
    "ItemMatchRepository",
    "ItemRepository",
    "ItemTypeRepository",
    "LookupRepository",
    "MessageRepository",
    "NotificationRepository",
    "RoleRepository",
    "StatusRepository",
    "UserRepository",
]
