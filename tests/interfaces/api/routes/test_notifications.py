"""Integration tests for the stored notification endpoints."""

from __future__ import annotations

from lostfound.application.use_cases.notifications import persist_notification
from lostfound.infrastructure.database import SessionLocal
from tests.factories import auth_headers, create_user


def _notify(user, title="Heads up"):
    with SessionLocal() as session:
        return persist_notification(
            session, user_id=user.id, title=title, body="Body", meta={"type": "info"}
        )


def test_list_is_newest_first_and_paged(client):
    user = create_user("user@example.com")
    for index in range(3):
        _notify(user, title=f"n{index}")

    everything = client.get("/api/notifications", headers=auth_headers(user)).json()
    assert [entry["title"] for entry in everything] == ["n2", "n1", "n0"]
    assert everything[0]["isRead"] is False
    assert everything[0]["metaJson"] == {"type": "info"}

    second_page = client.get(
        "/api/notifications",
        params={"page": 2, "pageSize": 2},
        headers=auth_headers(user),
    ).json()
    assert [entry["title"] for entry in second_page] == ["n0"]


def test_mark_read_and_mark_all(client):
    user = create_user("user@example.com")
    first = _notify(user)
    _notify(user)
    headers = auth_headers(user)

    assert client.post(f"/api/notifications/{first.id}/mark-read", headers=headers).status_code == 204
    flags = {entry["id"]: entry["isRead"] for entry in client.get("/api/notifications", headers=headers).json()}
    assert flags[first.id] is True
    assert list(flags.values()).count(False) == 1

    assert client.post("/api/notifications/mark-all-read", headers=headers).status_code == 204
    entries = client.get("/api/notifications", headers=headers).json()
    assert all(entry["isRead"] for entry in entries)


def test_other_users_notifications_are_protected(client):
    owner = create_user("owner@example.com")
    other = create_user("other@example.com")
    notification = _notify(owner)

    read = client.post(
        f"/api/notifications/{notification.id}/mark-read", headers=auth_headers(other)
    )
    delete = client.delete(
        f"/api/notifications/{notification.id}", headers=auth_headers(other)
    )

    assert read.status_code == 403
    assert delete.status_code == 403


def test_delete_notification(client):
    user = create_user("user@example.com")
    notification = _notify(user)
    headers = auth_headers(user)

    assert client.delete(f"/api/notifications/{notification.id}", headers=headers).status_code == 204
    assert client.get("/api/notifications", headers=headers).json() == []
    assert client.delete(f"/api/notifications/{notification.id}", headers=headers).status_code == 404


def test_notifications_require_authentication(client):
    assert client.get("/api/notifications").status_code == 401
