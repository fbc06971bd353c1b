"""Use cases for the admin-managed category, item type and status tables."""

from __future__ import annotations

import logging
from dataclasses import replace

from lostfound.application.errors import ConflictError, NotFoundError
from lostfound.domain.entities import LookupValue
from lostfound.infrastructure.repositories import LookupRepository
from lostfound.utils import now_utc_naive

logger = logging.getLogger(__name__)

_LABELS = {
    "Category": "Category",
    "ItemType": "Item type",
    "Status": "Status",
}


def _label(repository: LookupRepository) -> str:
    return _LABELS.get(repository.entity.__name__, repository.entity.__name__)


def _require(repository: LookupRepository, value_id: int) -> LookupValue:
    value = repository.get(value_id)
    if value is None:
        raise NotFoundError(f"{_label(repository)} not found")
    return value


def _ensure_unique_name(
    repository: LookupRepository, name: str, *, exclude_id: int | None = None
) -> None:
    existing = repository.get_by_name(name)
    if existing is not None and existing.id != exclude_id:
        raise ValueError("Name must be unique")


def list_lookup_values(repository: LookupRepository) -> list[LookupValue]:
    return repository.list()


def get_lookup_value(repository: LookupRepository, value_id: int) -> LookupValue:
    return _require(repository, value_id)


def create_lookup_value(
    repository: LookupRepository,
    *,
    name: str | None,
    description: str | None = None,
) -> LookupValue:
    """Create a value with a trimmed, unique ``name``."""

    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Name is required")
    _ensure_unique_name(repository, cleaned)
    value = repository.entity(
        id=None,
        name=cleaned,
        description=description,
        is_active=True,
        created_at=now_utc_naive(),
    )
    return repository.create(value)


def update_lookup_value(
    repository: LookupRepository,
    *,
    value_id: int,
    name: str | None,
    description: str | None,
) -> LookupValue:
    """Rename and describe ``value_id``; a blank ``name`` keeps the current one."""

    current = _require(repository, value_id)
    new_name = current.name
    cleaned = (name or "").strip()
    if cleaned:
        _ensure_unique_name(repository, cleaned, exclude_id=value_id)
        new_name = cleaned
    return repository.update(replace(current, name=new_name, description=description))


def delete_lookup_value(repository: LookupRepository, value_id: int) -> None:
    """Delete ``value_id`` unless items still reference it."""

    _require(repository, value_id)
    item_count = repository.count_items(value_id)
    if item_count:
        raise ConflictError(
            f"{_label(repository)} is in use by existing items. "
            "Reassign or merge before deleting.",
            item_count=item_count,
        )
    repository.delete(value_id)


def get_lookup_usage(repository: LookupRepository, value_id: int) -> int:
    """Return how many items reference ``value_id``."""

    return repository.count_items(value_id)


def merge_lookup_values(
    repository: LookupRepository, *, source_id: int, target_id: int
) -> int:
    """Move every item from ``source_id`` to ``target_id`` and drop the source."""

    if source_id == target_id:
        raise ValueError("Source and target must differ")
    _require(repository, source_id)
    _require(repository, target_id)
    moved = repository.merge_into(source_id, target_id)
    logger.info(
        "Merged %s %s into %s (%d items reassigned)",
        _label(repository).lower(),
        source_id,
        target_id,
        moved,
    )
    return moved


__all__ = [
    "create_lookup_value",
    "delete_lookup_value",
    "get_lookup_usage",
    "get_lookup_value",
    "list_lookup_values",
    "merge_lookup_values",
    "update_lookup_value",
]
