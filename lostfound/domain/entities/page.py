"""Generic container for paged query results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a listing together with the total row count."""

    total: int
    page: int
    page_size: int
    items: list[T] = field(default_factory=list)


__all__ = ["Page"]
