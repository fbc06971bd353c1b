"""Shared fixtures running the API against a throwaway SQLite database."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

TEST_DB_PATH = Path(tempfile.gettempdir()) / "lostfound_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ENVIRONMENT"] = "testing"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"

from lostfound.config import get_settings

get_settings.cache_clear()

from lostfound.infrastructure.database import (  # noqa: E402
    Base,
    engine,
    initialize_database,
)
from main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from freshly created and seeded tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client
