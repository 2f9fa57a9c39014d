"""End-to-end tests for the realtime websocket endpoint."""

from __future__ import annotations

from contextlib import contextmanager

import pytest
from fastapi import status
from starlette.websockets import WebSocketDisconnect


def _ws_path(headers: dict[str, str]) -> str:
    token = headers["Authorization"].split(" ", 1)[1]
    return f"/ws?token={token}"


def _join(websocket, user_id: int) -> None:
    websocket.send_json({"type": "join", "data": {"userId": user_id}})
    _sync(websocket)


def _sync(websocket) -> None:
    """Wait until every earlier frame on ``websocket`` was handled."""

    websocket.send_json({"type": "ping"})
    assert websocket.receive_json() == {"type": "pong", "data": {}}


def _send(websocket, sender_id: int, receiver_id: int, content: str) -> None:
    websocket.send_json(
        {
            "type": "sendMessage",
            "data": {"senderId": sender_id, "receiverId": receiver_id, "content": content},
        }
    )


@contextmanager
def _connected(client, user_id: int, headers: dict[str, str]):
    with client.websocket_connect(_ws_path(headers)) as websocket:
        _join(websocket, user_id)
        yield websocket


def test_connection_without_token_is_refused(client):
    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect("/ws"):
            pass

    assert excinfo.value.code == status.WS_1008_POLICY_VIOLATION


def test_connection_with_invalid_token_is_refused(client):
    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect("/ws?token=garbage"):
            pass

    assert excinfo.value.code == status.WS_1008_POLICY_VIOLATION


def test_first_message_reaches_both_rooms_and_opens_conversation(client, make_user):
    alice, alice_headers = make_user("alice")
    bob, bob_headers = make_user("bob")

    with _connected(client, alice, alice_headers) as alice_ws, _connected(
        client, bob, bob_headers
    ) as bob_ws:
        _send(alice_ws, alice, bob, "hello bob")

        received = alice_ws.receive_json()
        confirmation = alice_ws.receive_json()
        conversation = alice_ws.receive_json()
        delivered = bob_ws.receive_json()

    assert received["type"] == "receiveMessage"
    assert confirmation["type"] == "messageSent"
    assert conversation["type"] == "newConversation"
    assert delivered["type"] == "receiveMessage"
    assert delivered["data"] == received["data"] == confirmation["data"]
    assert delivered["data"]["senderId"] == alice
    assert delivered["data"]["receiverId"] == bob
    assert delivered["data"]["content"] == "hello bob"
    assert delivered["data"]["isRead"] == 0

    history = client.get(f"/messages/{alice}", headers=bob_headers)
    assert history.status_code == 200
    assert [message["content"] for message in history.json()] == ["hello bob"]


def test_third_message_of_a_pair_is_not_a_new_conversation(client, make_user):
    alice, alice_headers = make_user("alice")
    bob, bob_headers = make_user("bob")

    with _connected(client, alice, alice_headers) as alice_ws, _connected(
        client, bob, bob_headers
    ) as bob_ws:
        _send(alice_ws, alice, bob, "one")
        assert [alice_ws.receive_json()["type"] for _ in range(3)] == [
            "receiveMessage",
            "messageSent",
            "newConversation",
        ]
        assert bob_ws.receive_json()["type"] == "receiveMessage"

        _send(bob_ws, bob, alice, "two")
        assert [bob_ws.receive_json()["type"] for _ in range(3)] == [
            "receiveMessage",
            "messageSent",
            "newConversation",
        ]
        assert alice_ws.receive_json()["type"] == "receiveMessage"

        _send(alice_ws, alice, bob, "three")
        assert alice_ws.receive_json()["type"] == "receiveMessage"
        assert alice_ws.receive_json()["type"] == "messageSent"
        _sync(alice_ws)
        assert bob_ws.receive_json()["data"]["content"] == "three"


def test_message_to_offline_user_is_stored_without_error(client, make_user):
    alice, alice_headers = make_user("alice")
    carol, carol_headers = make_user("carol")

    with _connected(client, alice, alice_headers) as alice_ws:
        _send(alice_ws, alice, carol, "are you there?")
        assert [alice_ws.receive_json()["type"] for _ in range(3)] == [
            "receiveMessage",
            "messageSent",
            "newConversation",
        ]
        _sync(alice_ws)

    history = client.get(f"/messages/{alice}", headers=carol_headers)
    assert [message["content"] for message in history.json()] == ["are you there?"]


def test_every_connection_of_the_receiver_gets_the_message(client, make_user):
    alice, alice_headers = make_user("alice")
    bob, bob_headers = make_user("bob")

    with _connected(client, alice, alice_headers) as alice_ws, _connected(
        client, bob, bob_headers
    ) as bob_laptop, _connected(client, bob, bob_headers) as bob_phone:
        _send(alice_ws, alice, bob, "hi")

        assert bob_laptop.receive_json()["type"] == "receiveMessage"
        assert bob_phone.receive_json()["type"] == "receiveMessage"


def test_read_messages_notifies_the_sender(client, make_user):
    alice, alice_headers = make_user("alice")
    bob, bob_headers = make_user("bob")

    with _connected(client, alice, alice_headers) as alice_ws, _connected(
        client, bob, bob_headers
    ) as bob_ws:
        bob_ws.send_json(
            {"type": "readMessages", "data": {"senderId": alice, "receiverId": bob}}
        )

        assert alice_ws.receive_json() == {"type": "messagesRead", "data": {"by": bob}}


def test_logout_stops_deliveries_to_the_connection(client, make_user):
    alice, alice_headers = make_user("alice")
    bob, bob_headers = make_user("bob")

    with _connected(client, alice, alice_headers) as alice_ws, _connected(
        client, bob, bob_headers
    ) as bob_ws:
        bob_ws.send_json({"type": "logout", "data": {"userId": bob}})
        _sync(bob_ws)

        _send(alice_ws, alice, bob, "still there?")
        assert alice_ws.receive_json()["type"] == "receiveMessage"
        assert alice_ws.receive_json()["type"] == "messageSent"
        assert alice_ws.receive_json()["type"] == "newConversation"

        _sync(bob_ws)


def test_events_on_behalf_of_another_user_are_rejected(client, make_user):
    alice, _ = make_user("alice")
    bob, bob_headers = make_user("bob")
    _, mallory_headers = make_user("mallory")

    with _connected(client, bob, bob_headers) as bob_ws, client.websocket_connect(
        _ws_path(mallory_headers)
    ) as mallory_ws:
        mallory_ws.send_json({"type": "join", "data": {"userId": bob}})
        joined = mallory_ws.receive_json()

        _send(mallory_ws, alice, bob, "forged")
        forged = mallory_ws.receive_json()

        mallory_ws.send_json(
            {"type": "readMessages", "data": {"senderId": alice, "receiverId": bob}}
        )
        receipt = mallory_ws.receive_json()

        _sync(mallory_ws)
        _sync(bob_ws)

    for reply in (joined, forged, receipt):
        assert reply["type"] == "error"
        assert reply["data"]["message"] == "User id does not match the authenticated user"
    assert client.get(f"/messages/{alice}", headers=bob_headers).json() == []


def test_invalid_events_get_an_error_reply(client, make_user):
    _, headers = make_user("alice")

    with client.websocket_connect(_ws_path(headers)) as websocket:
        websocket.send_json({"type": "dance", "data": {}})
        unknown = websocket.receive_json()

        websocket.send_json({"type": "sendMessage", "data": {"senderId": 1}})
        incomplete = websocket.receive_json()

        websocket.send_text("not json")
        malformed = websocket.receive_json()

        websocket.send_bytes(b"\x00\x01")
        binary = websocket.receive_json()

        _sync(websocket)

    assert unknown == {"type": "error", "data": {"message": "Unknown or malformed event"}}
    assert incomplete["type"] == "error"
    assert "receiverId" in incomplete["data"]["message"]
    assert malformed == {"type": "error", "data": {"message": "Malformed event"}}
    assert binary == {"type": "error", "data": {"message": "Malformed event"}}


def test_blank_message_is_rejected_only_to_the_origin(client, make_user):
    alice, alice_headers = make_user("alice")
    bob, bob_headers = make_user("bob")

    with _connected(client, alice, alice_headers) as alice_ws, _connected(
        client, bob, bob_headers
    ) as bob_ws:
        _send(alice_ws, alice, bob, "   ")
        assert alice_ws.receive_json()["type"] == "error"
        _sync(bob_ws)

    assert client.get(f"/messages/{alice}", headers=bob_headers).json() == []
