"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from lostfound.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database."""

    url = settings.database_url
    if _is_sqlite(url):
        # Request handlers run in worker threads; SQLite must allow sharing.
        sqlite_engine = create_engine(
            url, connect_args={"check_same_thread": False}, pool_pre_ping=True
        )
        event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine
    return create_engine(url, pool_pre_ping=True)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have tables and the reference data is present."""

    from lostfound.infrastructure import models  # noqa: F401  # ensure models are imported
    from lostfound.infrastructure.seed import seed_reference_data

    Base.metadata.create_all(bind=engine, checkfirst=True)
    with SessionLocal() as session:
        created = seed_reference_data(session)
    if created:
        logger.info("Seeded %d reference rows", created)


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
