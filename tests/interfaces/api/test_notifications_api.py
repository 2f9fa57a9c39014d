"""Tests for the notification endpoints and their realtime push."""

from __future__ import annotations


def _create_post(client, headers, content="Hello world") -> int:
    response = client.post("/posts/", json={"content": content}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def _ws_path(headers: dict[str, str]) -> str:
    token = headers["Authorization"].split(" ", 1)[1]
    return f"/ws?token={token}"


def _join(websocket, user_id: int) -> None:
    websocket.send_json({"type": "join", "data": {"userId": user_id}})
    websocket.send_json({"type": "ping"})
    assert websocket.receive_json()["type"] == "pong"


def test_like_pushes_notification_to_post_owner(client, make_user):
    owner_id, owner_headers = make_user("owner", first_name="Olive", last_name="Owner")
    _, fan_headers = make_user("fan", first_name="Fiona", last_name="Fan")
    post_id = _create_post(client, owner_headers)

    with client.websocket_connect(_ws_path(owner_headers)) as websocket:
        _join(websocket, owner_id)

        response = client.post("/likes/", json={"post_id": post_id}, headers=fan_headers)
        assert response.status_code == 201
        assert response.json() == {"message": "Post liked"}

        pushed = websocket.receive_json()

    assert pushed["type"] == "notification"
    assert pushed["data"]["userId"] == owner_id
    assert pushed["data"]["type"] == "like"
    assert pushed["data"]["message"] == "Fiona Fan liked your post."
    assert pushed["data"]["postId"] == post_id
    assert pushed["data"]["isRead"] == 0

    stored = client.get("/notifications/", headers=owner_headers).json()
    assert [item["id"] for item in stored] == [pushed["data"]["id"]]


def test_own_like_does_not_notify(client, make_user):
    _, owner_headers = make_user("owner")
    post_id = _create_post(client, owner_headers)

    response = client.post("/likes/", json={"post_id": post_id}, headers=owner_headers)

    assert response.status_code == 201
    assert client.get("/notifications/", headers=owner_headers).json() == []


def test_comment_notifies_post_owner(client, make_user):
    _, owner_headers = make_user("owner")
    _, critic_headers = make_user("critic", first_name="Carl", last_name="Critic")
    post_id = _create_post(client, owner_headers)

    response = client.post(
        "/comments/", json={"post_id": post_id, "content": "Nice"}, headers=critic_headers
    )
    assert response.status_code == 201

    notifications = client.get("/notifications/", headers=owner_headers).json()
    assert len(notifications) == 1
    assert notifications[0]["type"] == "comment"
    assert notifications[0]["comment_id"] == response.json()["id"]
    assert notifications[0]["message"] == "Carl Critic commented on your post."


def test_friend_request_workflow_notifies_both_sides(client, make_user):
    _, sender_headers = make_user("sender", first_name="Sam", last_name="Sender")
    receiver_id, receiver_headers = make_user(
        "receiver", first_name="Rita", last_name="Receiver"
    )

    with client.websocket_connect(_ws_path(receiver_headers)) as websocket:
        _join(websocket, receiver_id)
        created = client.post(
            "/friend-requests/", json={"receiver_id": receiver_id}, headers=sender_headers
        )
        pushed = websocket.receive_json()

    assert created.status_code == 201
    assert pushed["data"]["type"] == "friend_request"
    assert pushed["data"]["message"] == "Sam Sender sent you a friend request."

    request_id = created.json()["id"]
    answered = client.put(
        f"/friend-requests/{request_id}",
        json={"status": "accepted"},
        headers=receiver_headers,
    )
    assert answered.status_code == 200
    assert answered.json()["status"] == "accepted"

    sender_notifications = client.get("/notifications/", headers=sender_headers).json()
    assert sender_notifications[0]["type"] == "friend_accepted"
    assert sender_notifications[0]["from_user_id"] == receiver_id
    assert sender_notifications[0]["message"] == "Rita Receiver accepted your friend request."


def test_create_notification_endpoint(client, make_user):
    target_id, target_headers = make_user("target")
    actor_id, actor_headers = make_user("actor")

    response = client.post(
        "/notifications/",
        json={
            "userId": target_id,
            "type": "message",
            "message": "You have a new message",
            "fromUserId": actor_id,
        },
        headers=actor_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user_id"] == target_id
    assert body["is_read"] is False
    assert client.get("/notifications/", headers=target_headers).json()[0]["id"] == body["id"]


def test_create_notification_rejects_unknown_type(client, make_user):
    target_id, headers = make_user("target")

    response = client.post(
        "/notifications/",
        json={"userId": target_id, "type": "poke", "message": "Poke!"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid notification type"


def test_create_notification_requires_fields(client, make_user):
    _, headers = make_user("target")

    response = client.post("/notifications/", json={"type": "like"}, headers=headers)

    assert response.status_code == 422


def test_mark_single_and_all_notifications_read(client, make_user):
    _, owner_headers = make_user("owner")
    _, fan_headers = make_user("fan")
    first_post = _create_post(client, owner_headers, "first")
    second_post = _create_post(client, owner_headers, "second")
    client.post("/likes/", json={"post_id": first_post}, headers=fan_headers)
    client.post("/likes/", json={"post_id": second_post}, headers=fan_headers)

    notifications = client.get("/notifications/", headers=owner_headers).json()
    assert len(notifications) == 2

    single = client.patch(
        f"/notifications/{notifications[0]['id']}/read", headers=owner_headers
    )
    assert single.status_code == 200
    assert single.json() == {"message": "Notification marked as read"}
    again = client.patch(
        f"/notifications/{notifications[0]['id']}/read", headers=owner_headers
    )
    assert again.status_code == 200

    read_flags = {
        item["id"]: item["is_read"]
        for item in client.get("/notifications/", headers=owner_headers).json()
    }
    assert read_flags[notifications[0]["id"]] is True
    assert read_flags[notifications[1]["id"]] is False

    everything = client.patch("/notifications/read-all", headers=owner_headers)
    assert everything.status_code == 200
    assert all(
        item["is_read"]
        for item in client.get("/notifications/", headers=owner_headers).json()
    )


def test_cannot_mark_someone_elses_notification(client, make_user):
    _, owner_headers = make_user("owner")
    _, fan_headers = make_user("fan")
    post_id = _create_post(client, owner_headers)
    client.post("/likes/", json={"post_id": post_id}, headers=fan_headers)
    notification_id = client.get("/notifications/", headers=owner_headers).json()[0]["id"]

    response = client.patch(f"/notifications/{notification_id}/read", headers=fan_headers)

    assert response.status_code == 404


def test_notifications_require_authentication(client):
    assert client.get("/notifications/").status_code == 401
