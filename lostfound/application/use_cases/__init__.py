"""Aggregate application use cases."""

from .users import get_user, issue_test_token

__all__ = [
    "get_user",
    "issue_test_token",
]
