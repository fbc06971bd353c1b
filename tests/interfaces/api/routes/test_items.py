"""Integration tests for the item endpoints."""

from __future__ import annotations

from tests.factories import FOUND, LOST, auth_headers, create_item, create_user


def test_create_and_read_item(client):
    owner = create_user("owner@example.com", first_name="Olga", last_name="Ruiz")
    headers = auth_headers(owner)

    response = client.post(
        "/api/items",
        json={
            "name": "  Blue backpack ",
            "location": "Cafeteria",
            "categoryId": 2,
            "typeId": LOST,
            "statusId": 2,
            "dateLostFound": "2024-03-01T10:00:00Z",
        },
        headers=headers,
    )

    assert response.status_code == 201
    item_id = response.json()["id"]
    assert response.headers["Location"] == f"/api/items/{item_id}"

    item = client.get(f"/api/items/{item_id}", headers=headers).json()
    assert item["name"] == "Blue backpack"
    assert item["userId"] == owner.id
    assert item["userName"] == "Olga Ruiz"
    assert item["categoryName"] == "Personal Items"
    assert item["typeName"] == "Lost"
    assert item["statusName"] == "Active"
    assert item["dateLostFound"].startswith("2024-03-01T10:00:00")


def test_create_item_rejects_unknown_lookup(client):
    owner = create_user("owner@example.com")

    response = client.post(
        "/api/items",
        json={"name": "Phone", "categoryId": 999},
        headers=auth_headers(owner),
    )

    assert response.status_code == 400


def test_create_item_requires_name(client):
    owner = create_user("owner@example.com")

    response = client.post("/api/items", json={"name": "   "}, headers=auth_headers(owner))

    assert response.status_code == 400


def test_list_items_filters_and_pages(client):
    owner = create_user("owner@example.com")
    create_item(owner, "Red scarf", type_id=LOST)
    create_item(owner, "Silver ring", type_id=FOUND)
    create_item(owner, "Red umbrella", type_id=FOUND)
    headers = auth_headers(owner)

    found = client.get("/api/items", params={"typeId": FOUND}, headers=headers).json()
    assert found["total"] == 2
    assert [item["name"] for item in found["items"]] == ["Red umbrella", "Silver ring"]

    searched = client.get("/api/items", params={"q": "red"}, headers=headers).json()
    assert searched["total"] == 2

    paged = client.get(
        "/api/items", params={"page": 2, "pageSize": 2}, headers=headers
    ).json()
    assert paged["page"] == 2
    assert [item["name"] for item in paged["items"]] == ["Red scarf"]


def test_update_item_keeps_omitted_fields(client):
    owner = create_user("owner@example.com")
    item = create_item(owner, "Laptop")
    headers = auth_headers(owner)

    response = client.put(
        f"/api/items/{item.id}", json={"statusId": 3}, headers=headers
    )

    assert response.status_code == 204
    updated = client.get(f"/api/items/{item.id}", headers=headers).json()
    assert updated["name"] == "Laptop"
    assert updated["statusName"] == "Claimed"
    assert updated["updatedAt"] is not None


def test_only_owner_or_admin_can_modify(client):
    owner = create_user("owner@example.com")
    stranger = create_user("stranger@example.com")
    admin = create_user("admin@example.com", role_name="Admin")
    item = create_item(owner)

    forbidden = client.put(
        f"/api/items/{item.id}", json={"name": "Mine"}, headers=auth_headers(stranger)
    )
    assert forbidden.status_code == 403

    allowed = client.put(
        f"/api/items/{item.id}", json={"name": "Renamed"}, headers=auth_headers(admin)
    )
    assert allowed.status_code == 204


def test_deleted_item_disappears(client):
    owner = create_user("owner@example.com")
    item = create_item(owner)
    headers = auth_headers(owner)

    assert client.delete(f"/api/items/{item.id}", headers=headers).status_code == 204
    assert client.get(f"/api/items/{item.id}", headers=headers).status_code == 404
    assert client.get("/api/items", headers=headers).json()["total"] == 0
    assert client.delete(f"/api/items/{item.id}", headers=headers).status_code == 404
