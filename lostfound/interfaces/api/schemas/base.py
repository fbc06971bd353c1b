"""Shared base classes for the camelCase JSON schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lostfound.utils import ensure_utc

T = TypeVar("T")

# Stored datetimes are naive UTC; expose them with an explicit offset.
UtcDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


class CamelModel(BaseModel):
    """Schema serialised with camelCase keys and accepting either spelling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PageRead(CamelModel, Generic[T]):
    total: int
    page: int
    page_size: int
    items: list[T]


__all__ = ["CamelModel", "PageRead", "UtcDateTime"]
