"""Tests for the development token endpoint."""

from __future__ import annotations

import pytest

from lostfound.config import get_settings
from lostfound.infrastructure.security import decode_access_token


@pytest.fixture()
def production_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_issue_token_creates_default_test_user(client):
    response = client.post("/api/test/token")

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == "playwright@test.local"
    assert body["user"]["roleName"] == "User"
    assert body["user"]["avatarUrl"] is None

    claims = decode_access_token(body["token"])
    assert claims["sub"] == str(body["user"]["id"])
    assert claims["role"] == "User"
    assert claims["iss"] == "LostAndFoundApp"


def test_issue_token_reuses_existing_user(client):
    payload = {"googleId": "g-42", "email": "tester@example.com", "firstName": "Ana"}

    first = client.post("/api/test/token", json=payload).json()
    second = client.post("/api/test/token", json=payload).json()

    assert first["user"]["id"] == second["user"]["id"]
    assert first["user"]["firstName"] == "Ana"


def test_issued_token_authenticates_requests(client):
    token = client.post("/api/test/token").json()["token"]

    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == "playwright@test.local"
    assert response.json()["lastLogin"] is not None


def test_issue_token_is_hidden_outside_development(client, production_environment):
    response = client.post("/api/test/token")

    assert response.status_code == 404


def test_invalid_bearer_token_is_rejected(client):
    response = client.get("/api/users/me", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_missing_bearer_token_is_rejected(client):
    assert client.get("/api/users/me").status_code == 401
