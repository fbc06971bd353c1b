"""Persistence layer for the category, item type and status tables."""

from __future__ import annotations

from typing import ClassVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from lostfound.domain.entities import Category, ItemType, LookupValue, Status
from lostfound.infrastructure.models import (
    CategoryModel,
    ItemModel,
    ItemTypeModel,
    StatusModel,
)
from lostfound.utils import now_utc_naive


class LookupRepository:
    """Shared CRUD operations for the lookup tables.

    Subclasses bind the ORM model, the domain entity and the ``item`` column
    that references the table.
    """

    model: ClassVar[type]
    entity: ClassVar[type[LookupValue]]
    item_column: ClassVar[str]

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> list[LookupValue]:
        query = self.session.query(self.model).order_by(self.model.name)
        return [self._to_entity(model) for model in query.all()]

    def get(self, value_id: int) -> LookupValue | None:
        model = self.session.get(self.model, value_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> LookupValue | None:
        model = (
            self.session.query(self.model)
            .filter(func.lower(self.model.name) == name.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, value: LookupValue) -> LookupValue:
        model = self.model(
            name=value.name,
            description=value.description,
            is_active=value.is_active,
            created_at=value.created_at or now_utc_naive(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, value: LookupValue) -> LookupValue:
        model = self.session.get(self.model, value.id)
        if model is None:
            msg = f"{self.entity.__name__} with id {value.id} not found"
            raise ValueError(msg)
        model.name = value.name
        model.description = value.description
        model.is_active = value.is_active
        model.updated_at = now_utc_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, value_id: int) -> None:
        model = self.session.get(self.model, value_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    def count_items(self, value_id: int) -> int:
        """Return how many items reference ``value_id``, soft-deleted ones included."""

        column = getattr(ItemModel, self.item_column)
        return (
            self.session.query(func.count(ItemModel.id))
            .filter(column == value_id)
            .scalar()
            or 0
        )

    def merge_into(self, source_id: int, target_id: int) -> int:
        """Point every item at ``target_id`` and delete ``source_id`` atomically.

        Returns the number of reassigned items.
        """

        column = getattr(ItemModel, self.item_column)
        try:
            moved = (
                self.session.query(ItemModel)
                .filter(column == source_id)
                .update(
                    {column: target_id, ItemModel.updated_at: now_utc_naive()},
                    synchronize_session=False,
                )
            )
            source = self.session.get(self.model, source_id)
            if source is not None:
                self.session.delete(source)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return moved

    def _to_entity(self, model) -> LookupValue:
        return self.entity(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class CategoryRepository(LookupRepository):
    model = CategoryModel
    entity = Category
    item_column = "category_id"


class ItemTypeRepository(LookupRepository):
    model = ItemTypeModel
    entity = ItemType
    item_column = "type_id"


class StatusRepository(LookupRepository):
    model = StatusModel
    entity = Status
    item_column = "status_id"


__all__ = [
    "CategoryRepository",
    "ItemTypeRepository",
    "LookupRepository",
    "StatusRepository",
]
