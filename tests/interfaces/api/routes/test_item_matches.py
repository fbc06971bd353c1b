"""Integration tests for the item match endpoints."""

from __future__ import annotations

from lostfound.infrastructure.security import create_access_token
from tests.factories import FOUND, LOST, auth_headers, create_item, create_user


def _hub_url(user) -> str:
    return f"/hubs/messages?access_token={create_access_token(user)}"


def _setup():
    loser = create_user("loser@example.com")
    finder = create_user("finder@example.com")
    lost = create_item(loser, "Green wallet", type_id=LOST)
    found = create_item(finder, "Wallet (green)", type_id=FOUND)
    return loser, finder, lost, found


def _create_match(client, creator, lost, found, score=80):
    return client.post(
        "/api/item-matches",
        json={"lostItemId": lost.id, "foundItemId": found.id, "score": score},
        headers=auth_headers(creator),
    )


def test_create_match_notifies_both_owners(client):
    loser, finder, lost, found = _setup()
    moderator = create_user("mod@example.com", role_name="Moderator")

    response = _create_match(client, moderator, lost, found)

    assert response.status_code == 201
    match = response.json()
    assert match["creatorUserId"] == moderator.id
    assert match["score"] == 80
    assert response.headers["Location"] == f"/api/item-matches/{match['id']}"

    for owner in (loser, finder):
        notifications = client.get(
            "/api/notifications", headers=auth_headers(owner)
        ).json()
        assert [entry["title"] for entry in notifications] == ["Possible match found"]
        assert notifications[0]["metaJson"] == {
            "type": "itemmatch",
            "itemMatchId": match["id"],
        }


def test_create_match_validates_input(client):
    loser, _, lost, found = _setup()

    same = _create_match(client, loser, lost, lost)
    assert same.status_code == 400

    out_of_range = _create_match(client, loser, lost, found, score=101)
    assert out_of_range.status_code == 400

    response = client.post(
        "/api/item-matches",
        json={"lostItemId": lost.id, "foundItemId": 999},
        headers=auth_headers(loser),
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid item ids"


def test_matches_for_item_are_public(client):
    loser, _, lost, found = _setup()
    _create_match(client, loser, lost, found)

    response = client.get(f"/api/item-matches/item/{found.id}")

    assert response.status_code == 200
    assert [match["lostItemId"] for match in response.json()] == [lost.id]


def test_listing_is_limited_to_involved_users(client):
    loser, finder, lost, found = _setup()
    stranger = create_user("stranger@example.com")
    admin = create_user("admin@example.com", role_name="Admin")
    match_id = _create_match(client, loser, lost, found).json()["id"]

    assert len(client.get("/api/item-matches", headers=auth_headers(finder)).json()) == 1
    assert client.get("/api/item-matches", headers=auth_headers(stranger)).json() == []
    assert len(client.get("/api/item-matches", headers=auth_headers(admin)).json()) == 1

    hidden = client.get(f"/api/item-matches/{match_id}", headers=auth_headers(stranger))
    assert hidden.status_code == 403
    visible = client.get(f"/api/item-matches/{match_id}", headers=auth_headers(finder))
    assert visible.status_code == 200


def test_soft_delete_match(client):
    loser, finder, lost, found = _setup()
    stranger = create_user("stranger@example.com")
    match_id = _create_match(client, loser, lost, found).json()["id"]

    forbidden = client.post(
        f"/api/item-matches/{match_id}/soft-delete", headers=auth_headers(stranger)
    )
    assert forbidden.status_code == 403

    removed = client.post(
        f"/api/item-matches/{match_id}/soft-delete", headers=auth_headers(finder)
    )
    assert removed.status_code == 204
    assert client.get(f"/api/item-matches/item/{lost.id}").json() == []

    again = client.post(
        f"/api/item-matches/{match_id}/soft-delete", headers=auth_headers(finder)
    )
    assert again.status_code == 400

    titles = [
        entry["title"]
        for entry in client.get("/api/notifications", headers=auth_headers(loser)).json()
    ]
    assert titles == ["Match removed", "Possible match found"]


def test_soft_delete_unknown_match_returns_404(client):
    user = create_user("user@example.com")

    response = client.post(
        "/api/item-matches/42/soft-delete", headers=auth_headers(user)
    )

    assert response.status_code == 404


def test_match_events_reach_both_owners_with_alert_flags(client):
    loser, finder, lost, found = _setup()

    with client.websocket_connect(_hub_url(loser)) as loser_socket, client.websocket_connect(
        _hub_url(finder)
    ) as finder_socket:
        match_id = _create_match(client, loser, lost, found, score=70).json()["id"]

        created = {
            "type": "itemmatch",
            "itemMatchId": match_id,
            "lostItemId": lost.id,
            "foundItemId": found.id,
            "score": 70,
        }
        assert loser_socket.receive_json() == {
            "type": "ReceiveNotification",
            "data": {**created, "suppressAlert": True},
        }
        assert finder_socket.receive_json() == {
            "type": "ReceiveNotification",
            "data": {**created, "suppressAlert": False},
        }

        removed = client.post(
            f"/api/item-matches/{match_id}/soft-delete", headers=auth_headers(finder)
        )
        assert removed.status_code == 204

        assert loser_socket.receive_json() == {
            "type": "ReceiveNotification",
            "data": {
                "type": "itemmatch_deleted",
                "itemMatchId": match_id,
                "suppressAlert": False,
            },
        }
        assert finder_socket.receive_json() == {
            "type": "ReceiveNotification",
            "data": {
                "type": "itemmatch_deleted",
                "itemMatchId": match_id,
                "suppressAlert": True,
            },
        }
