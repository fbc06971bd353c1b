"""Use cases for reported lost and found items."""

from .create_item import create_item
from .delete_item import delete_item
from .get_item import get_item
from .list_items import list_items
from .update_item import update_item

__all__ = [
    "create_item",
    "delete_item",
    "get_item",
    "list_items",
    "update_item",
]
