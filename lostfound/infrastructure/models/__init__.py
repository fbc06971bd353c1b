"""ORM models used by the application infrastructure."""

from .role import RoleModel
from .user import UserModel
from .lookup import CategoryModel, ItemTypeModel, StatusModel
from .item import ItemModel
from .item_match import ItemMatchModel
from .message import MessageModel
from .notification import NotificationModel

__all__ = [
    "CategoryModel",
    "ItemMatchModel",
    "ItemModel",
    "ItemTypeModel",
    "MessageModel",
    "NotificationModel",
    "RoleModel",
    "StatusModel",
    "UserModel",
]
