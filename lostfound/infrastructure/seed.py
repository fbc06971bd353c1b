"""Reference data inserted when the database is initialised."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from lostfound.infrastructure.models import (
    CategoryModel,
    ItemTypeModel,
    RoleModel,
    StatusModel,
)

logger = logging.getLogger(__name__)

ROLES = (
    (1, "User", "Regular user"),
    (2, "Admin", "Administrator"),
    (3, "Moderator", "Content moderator"),
)

ITEM_TYPES = (
    (1, "Lost", "Item that was lost"),
    (2, "Found", "Item that was found"),
)

STATUSES = (
    (1, "Pending", "Waiting for review"),
    (2, "Active", "Visible to everybody"),
    (3, "Claimed", "Returned to its owner"),
    (4, "Closed", "No longer tracked"),
)

CATEGORIES = (
    (2, "Personal Items", "Wallets, keys, bags and similar"),
    (3, "Clothing", "Jackets, hats, shoes"),
    (4, "Documents", "IDs, passports, cards"),
    (5, "Other", "Anything else"),
    (6, "Electronics", "Phones, laptops, headphones"),
)


def _seed_table(session: Session, model, rows) -> int:
    existing = {name.lower() for (name,) in session.query(model.name).all()}
    taken_ids = {row_id for (row_id,) in session.query(model.id).all()}
    created = 0
    for row_id, name, description in rows:
        if name.lower() in existing:
            continue
        record = model(name=name, description=description, is_active=True)
        if row_id not in taken_ids:
            record.id = row_id
        session.add(record)
        created += 1
    return created


def seed_reference_data(session: Session) -> int:
    """Insert missing roles and lookup values, returning how many were created."""

    created = 0
    created += _seed_table(session, RoleModel, ROLES)
    created += _seed_table(session, ItemTypeModel, ITEM_TYPES)
    created += _seed_table(session, StatusModel, STATUSES)
    created += _seed_table(session, CategoryModel, CATEGORIES)
    if created:
        session.commit()
        logger.debug("Inserted %d reference rows", created)
    return created


__all__ = ["seed_reference_data"]
