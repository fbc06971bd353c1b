"""Persistence layer for reported items."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from lostfound.domain.entities import Item, Page
from lostfound.infrastructure.models import ItemModel
from lostfound.utils import ensure_utc_naive, now_utc_naive


@dataclass
class ItemFilters:
    """Optional criteria applied when listing items."""

    user_id: int | None = None
    status_id: int | None = None
    category_id: int | None = None
    type_id: int | None = None
    search: str | None = None


class ItemRepository:
    """Provide CRUD operations for :class:`Item` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_paged(
        self, filters: ItemFilters, *, page: int, page_size: int
    ) -> Page[Item]:
        query = self.session.query(ItemModel).filter(ItemModel.is_deleted.is_(False))
        if filters.user_id is not None:
            query = query.filter(ItemModel.user_id == filters.user_id)
        if filters.status_id is not None:
            query = query.filter(ItemModel.status_id == filters.status_id)
        if filters.category_id is not None:
            query = query.filter(ItemModel.category_id == filters.category_id)
        if filters.type_id is not None:
            query = query.filter(ItemModel.type_id == filters.type_id)
        term = (filters.search or "").strip().lower()
        if term:
            pattern = f"%{term}%"
            query = query.filter(
                or_(
                    func.lower(ItemModel.name).like(pattern),
                    func.lower(ItemModel.description).like(pattern),
                    func.lower(ItemModel.location).like(pattern),
                )
            )

        total = query.count()
        models = (
            query.order_by(ItemModel.created_at.desc(), ItemModel.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return Page(
            total=total,
            page=page,
            page_size=page_size,
            items=[self._to_entity(model) for model in models],
        )

    def get(self, item_id: int, *, include_deleted: bool = False) -> Item | None:
        model = self._get_model(item_id, include_deleted=include_deleted)
        return self._to_entity(model) if model else None

    def get_owner_map(self, item_ids: Iterable[int]) -> dict[int, int | None]:
        """Return ``{item_id: owner_id}`` for the live items in ``item_ids``."""

        ids = {item_id for item_id in item_ids if item_id}
        if not ids:
            return {}
        rows = (
            self.session.query(ItemModel.id, ItemModel.user_id)
            .filter(ItemModel.id.in_(ids))
            .filter(ItemModel.is_deleted.is_(False))
            .all()
        )
        return {item_id: user_id for item_id, user_id in rows}

    def create(self, item: Item) -> Item:
        model = ItemModel()
        self._apply_entity_to_model(model, item)
        model.created_at = ensure_utc_naive(item.created_at) or now_utc_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, item: Item) -> Item:
        model = self._get_model(item.id, include_deleted=True)
        if model is None:
            msg = f"Item with id {item.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, item)
        model.updated_at = now_utc_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def soft_delete(self, item_id: int, *, deleted_by: int | None) -> None:
        model = self._get_model(item_id, include_deleted=True)
        if model is None:
            msg = f"Item with id {item_id} not found"
            raise ValueError(msg)
        if model.is_deleted:
            return
        now = now_utc_naive()
        model.is_deleted = True
        model.deleted_at = now
        model.deleted_by_user_id = deleted_by
        model.updated_at = now
        self.session.add(model)
        self.session.commit()

    def _get_model(self, item_id: int | None, *, include_deleted: bool) -> ItemModel | None:
        query = self.session.query(ItemModel).filter(ItemModel.id == item_id)
        if not include_deleted:
            query = query.filter(ItemModel.is_deleted.is_(False))
        return query.first()

    @staticmethod
    def _apply_entity_to_model(model: ItemModel, item: Item) -> None:
        model.user_id = item.user_id
        model.category_id = item.category_id
        model.status_id = item.status_id
        model.type_id = item.type_id
        model.name = item.name
        model.description = item.description
        model.location = item.location
        model.date_lost_found = ensure_utc_naive(item.date_lost_found)

    @staticmethod
    def _to_entity(model: ItemModel) -> Item:
        owner = model.user
        return Item(
            id=model.id,
            user_id=model.user_id,
            category_id=model.category_id,
            status_id=model.status_id,
            type_id=model.type_id,
            name=model.name,
            description=model.description,
            location=model.location,
            date_lost_found=model.date_lost_found,
            created_at=model.created_at,
            updated_at=model.updated_at,
            is_deleted=model.is_deleted,
            deleted_at=model.deleted_at,
            deleted_by_user_id=model.deleted_by_user_id,
            user_name=_owner_name(owner),
            category_name=model.category.name if model.category else None,
            type_name=model.type.name if model.type else None,
            status_name=model.status.name if model.status else None,
        )


def _owner_name(owner) -> str | None:
    if owner is None:
        return None
    full_name = f"{owner.first_name or ''} {owner.last_name or ''}".strip()
    return full_name or owner.email


__all__ = ["ItemFilters", "ItemRepository"]
