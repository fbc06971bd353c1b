from .auth import DevTokenRequest, DevTokenResponse, DevTokenUser
from .base import CamelModel, PageRead
from .item import ItemCreate, ItemCreated, ItemRead, ItemUpdate
from .item_match import ItemMatchCreate, ItemMatchRead
from .lookup import LookupRead, LookupUsageRead, LookupWrite
from .message import ConversationRead, MessageRead, MessageSend, UnreadCountRead
from .notification import NotificationRead
from .user import RoleUpdate, RoleUpdateResult, UserRead

__all__ = [
    "CamelModel",
    "ConversationRead",
    "ItemCreate",
    "ItemCreated",
    "ItemMatchCreate",
    "ItemMatchRead",
    "ItemRead",
    "ItemUpdate",
    "LookupRead",
    "LookupUsageRead",
    "LookupWrite",
    "MessageRead",
    "MessageSend",
    "NotificationRead",
    "PageRead",
    "RoleUpdate",
    "RoleUpdateResult",
    "DevTokenRequest",
    "DevTokenResponse",
    "DevTokenUser",
    "UnreadCountRead",
    "UserRead",
]
