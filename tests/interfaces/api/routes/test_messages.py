"""Integration tests for chat messages and the pushes they trigger."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from lostfound.application.use_cases.messages import send_message
from lostfound.infrastructure.database import SessionLocal
from lostfound.infrastructure.models import MessageModel, NotificationModel
from lostfound.infrastructure.realtime import (
    ConnectionRegistry,
    NotificationDispatcher,
    WebSocketTransport,
)
from lostfound.infrastructure.repositories import NotificationRepository
from lostfound.infrastructure.security import create_access_token
from tests.factories import auth_headers, create_user


def _hub_url(user) -> str:
    return f"/hubs/messages?access_token={create_access_token(user)}"


def _send(client, sender, receiver_id, content="Hi, is this your wallet?"):
    return client.post(
        "/api/messages/send",
        json={"receiverId": receiver_id, "content": content},
        headers=auth_headers(sender),
    )


def test_send_message_is_stored_and_notifies_receiver(client):
    alice = create_user("alice@example.com", first_name="Alice", last_name="A")
    bob = create_user("bob@example.com", first_name="Bob", last_name="B")

    response = _send(client, alice, bob.id)

    assert response.status_code == 200
    message = response.json()
    assert message["senderId"] == alice.id
    assert message["receiverId"] == bob.id
    assert message["isRead"] is False

    notifications = client.get("/api/notifications", headers=auth_headers(bob)).json()
    assert len(notifications) == 1
    assert notifications[0]["title"] == "New message"
    assert notifications[0]["metaJson"] == {
        "messageId": message["id"],
        "fromUserId": alice.id,
    }


def test_send_message_validation(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")

    assert _send(client, alice, alice.id).status_code == 400
    assert _send(client, alice, bob.id, content="   ").status_code == 400
    assert _send(client, alice, bob.id, content="x" * 2001).status_code == 400
    assert _send(client, alice, 999).status_code == 404
    assert _send(client, alice, bob.id, content="x" * 2000).status_code == 200


def test_online_users_receive_pushes(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")

    with client.websocket_connect(_hub_url(bob)) as bob_socket, client.websocket_connect(
        _hub_url(alice)
    ) as alice_socket:
        message = _send(client, alice, bob.id, content="Found your keys").json()

        received = bob_socket.receive_json()
        assert received["type"] == "ReceiveMessage"
        assert received["data"]["id"] == message["id"]
        assert received["data"]["content"] == "Found your keys"

        notification = bob_socket.receive_json()
        assert notification["type"] == "ReceiveNotification"
        assert notification["data"]["type"] == "message"
        assert notification["data"]["messageId"] == message["id"]
        assert notification["data"]["suppressAlert"] is False

        sent = alice_socket.receive_json()
        assert sent == {"type": "MessageSent", "data": received["data"]}


def test_every_connection_of_the_receiver_gets_the_message(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")

    with client.websocket_connect(_hub_url(bob)) as first_tab, client.websocket_connect(
        _hub_url(bob)
    ) as second_tab:
        message_id = _send(client, alice, bob.id).json()["id"]

        for tab in (first_tab, second_tab):
            frame = tab.receive_json()
            assert frame["type"] == "ReceiveMessage"
            assert frame["data"]["id"] == message_id


def test_history_pages_from_the_newest_messages(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")
    for index in range(5):
        sender, receiver = (alice, bob) if index % 2 == 0 else (bob, alice)
        _send(client, sender, receiver.id, content=f"message {index}")

    latest = client.get(
        f"/api/messages/history/{bob.id}",
        params={"pageSize": 2},
        headers=auth_headers(alice),
    ).json()
    assert [message["content"] for message in latest] == ["message 3", "message 4"]

    older = client.get(
        f"/api/messages/history/{bob.id}",
        params={"page": 3, "pageSize": 2},
        headers=auth_headers(alice),
    ).json()
    assert [message["content"] for message in older] == ["message 0"]


def test_conversations_and_unread_count(client):
    alice = create_user("alice@example.com", first_name="Alice", last_name="Smith")
    bob = create_user("bob@example.com")
    carol = create_user("carol@example.com", first_name=None, last_name=None)
    _send(client, alice, bob.id, content="first")
    _send(client, alice, bob.id, content="second")
    _send(client, carol, bob.id, content="hello from carol")

    conversations = client.get(
        "/api/messages/conversations", headers=auth_headers(bob)
    ).json()

    assert [entry["otherUserId"] for entry in conversations] == [carol.id, alice.id]
    assert conversations[0]["otherUserName"] == "carol@example.com"
    assert conversations[1]["otherUserName"] == "Alice Smith"
    assert conversations[1]["lastMessage"] == "second"
    assert conversations[1]["unreadCount"] == 2

    unread = client.get("/api/messages/unread-count", headers=auth_headers(bob)).json()
    assert unread == {"unread": 3}


def test_mark_read_is_reserved_to_the_receiver_and_pushed_to_sender(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")
    message_id = _send(client, alice, bob.id).json()["id"]

    forbidden = client.post(
        f"/api/messages/{message_id}/mark-read", headers=auth_headers(alice)
    )
    assert forbidden.status_code == 403

    with client.websocket_connect(_hub_url(alice)) as alice_socket:
        response = client.post(
            f"/api/messages/{message_id}/mark-read", headers=auth_headers(bob)
        )
        assert response.status_code == 204

        frame = alice_socket.receive_json()
        assert frame["type"] == "MessageRead"
        assert frame["data"]["messageId"] == message_id
        assert frame["data"]["readAt"] is not None

    unread = client.get("/api/messages/unread-count", headers=auth_headers(bob)).json()
    assert unread == {"unread": 0}
    missing = client.post("/api/messages/999/mark-read", headers=auth_headers(bob))
    assert missing.status_code == 404


def test_soft_delete_hides_message_only_for_caller(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")
    stranger = create_user("stranger@example.com")
    message_id = _send(client, alice, bob.id).json()["id"]

    denied = client.post(
        f"/api/messages/{message_id}/soft-delete", headers=auth_headers(stranger)
    )
    assert denied.status_code == 403

    hidden = client.post(
        f"/api/messages/{message_id}/soft-delete", headers=auth_headers(bob)
    )
    assert hidden.status_code == 204

    bob_history = client.get(
        f"/api/messages/history/{alice.id}", headers=auth_headers(bob)
    ).json()
    alice_history = client.get(
        f"/api/messages/history/{bob.id}", headers=auth_headers(alice)
    ).json()
    assert bob_history == []
    assert [message["id"] for message in alice_history] == [message_id]
    assert client.get("/api/messages/unread-count", headers=auth_headers(bob)).json() == {
        "unread": 0
    }

    restored = client.post(
        f"/api/messages/{message_id}/undo-delete", headers=auth_headers(bob)
    )
    assert restored.status_code == 204
    bob_history = client.get(
        f"/api/messages/history/{alice.id}", headers=auth_headers(bob)
    ).json()
    assert [message["id"] for message in bob_history] == [message_id]


def test_delete_conversation_notifies_the_other_user(client):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")
    _send(client, alice, bob.id, content="one")
    _send(client, bob, alice.id, content="two")

    with client.websocket_connect(_hub_url(bob)) as bob_socket:
        response = client.post(
            f"/api/messages/conversations/{bob.id}/delete", headers=auth_headers(alice)
        )
        assert response.status_code == 204

        frame = bob_socket.receive_json()
        assert frame == {"type": "ConversationDeleted", "data": {"otherUserId": alice.id}}

    assert client.get(
        "/api/messages/conversations", headers=auth_headers(alice)
    ).json() == []
    bob_history = client.get(
        f"/api/messages/history/{alice.id}", headers=auth_headers(bob)
    ).json()
    assert [message["content"] for message in bob_history] == ["one", "two"]


def test_message_is_not_stored_when_its_notification_fails(monkeypatch):
    alice = create_user("alice@example.com")
    bob = create_user("bob@example.com")

    def failing_create(self, notification, **kwargs):
        self.session.add(NotificationModel(user_id=None, title="x", body="x"))
        self.session.flush()

    monkeypatch.setattr(NotificationRepository, "create", failing_create)

    with SessionLocal() as session:
        dispatcher = NotificationDispatcher(ConnectionRegistry(), WebSocketTransport())
        with pytest.raises(IntegrityError):
            send_message(session, dispatcher, sender=alice, receiver_id=bob.id, content="hi")

    with SessionLocal() as session:
        assert session.query(MessageModel).count() == 0
        assert session.query(NotificationModel).count() == 0
