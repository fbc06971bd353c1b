"""Use cases for managing users."""

from .delete_user import restore_user, soft_delete_user
from .get_user import get_user
from .issue_test_token import issue_test_token
from .list_users import list_deleted_users, list_users
from .update_user_role import update_user_role

__all__ = [
    "get_user",
    "issue_test_token",
    "list_deleted_users",
    "list_users",
    "restore_user",
    "soft_delete_user",
    "update_user_role",
]
