"""Integration tests for the category, item type and status endpoints."""

from __future__ import annotations

import pytest

from tests.factories import auth_headers, create_item, create_user


@pytest.fixture()
def admin_headers():
    return auth_headers(create_user("admin@example.com", role_name="Admin"))


def test_seeded_values_are_listed_by_name(client):
    user = create_user("user@example.com")

    response = client.get("/api/categories", headers=auth_headers(user))

    assert response.status_code == 200
    names = [value["name"] for value in response.json()]
    assert names == sorted(names)
    assert "Electronics" in names
    statuses = client.get("/api/statuses", headers=auth_headers(user)).json()
    assert {value["name"] for value in statuses} == {"Pending", "Active", "Claimed", "Closed"}


def test_only_admins_can_create(client):
    user = create_user("user@example.com")

    response = client.post(
        "/api/categories", json={"name": "Toys"}, headers=auth_headers(user)
    )

    assert response.status_code == 403


def test_create_update_and_delete_unused_value(client, admin_headers):
    created = client.post(
        "/api/categories", json={"name": " Toys ", "description": "Games"}, headers=admin_headers
    )
    assert created.status_code == 201
    category_id = created.json()["id"]
    assert created.json()["name"] == "Toys"
    assert created.headers["Location"] == f"/api/categories/{category_id}"

    duplicate = client.post("/api/categories", json={"name": "toys"}, headers=admin_headers)
    assert duplicate.status_code == 400

    renamed = client.put(
        f"/api/categories/{category_id}",
        json={"name": "", "description": "Board games"},
        headers=admin_headers,
    )
    assert renamed.status_code == 204
    current = client.get(f"/api/categories/{category_id}", headers=admin_headers).json()
    assert current["name"] == "Toys"
    assert current["description"] == "Board games"

    assert client.delete(f"/api/categories/{category_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/categories/{category_id}", headers=admin_headers).status_code == 404


def test_delete_in_use_value_returns_conflict(client, admin_headers):
    owner = create_user("owner@example.com")
    create_item(owner, category_id=6)
    create_item(owner, category_id=6)

    response = client.delete("/api/categories/6", headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["itemCount"] == 2
    assert "in use" in response.json()["error"]
    usage = client.get("/api/categories/6/usage", headers=admin_headers).json()
    assert usage == {"id": 6, "itemCount": 2}


def test_merge_moves_items_and_removes_source(client, admin_headers):
    owner = create_user("owner@example.com")
    item = create_item(owner, category_id=6)

    response = client.post("/api/categories/6/merge-into/5", headers=admin_headers)

    assert response.status_code == 204
    assert client.get("/api/categories/6", headers=admin_headers).status_code == 404
    moved = client.get(f"/api/items/{item.id}", headers=admin_headers).json()
    assert moved["categoryId"] == 5


def test_merge_into_itself_is_rejected(client, admin_headers):
    response = client.post("/api/item-types/1/merge-into/1", headers=admin_headers)

    assert response.status_code == 400


def test_statuses_cannot_be_merged(client, admin_headers):
    response = client.post("/api/statuses/1/merge-into/2", headers=admin_headers)

    assert response.status_code == 404
