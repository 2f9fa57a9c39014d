"""Integration tests for the user and authentication endpoints."""

from __future__ import annotations

USER_PAYLOAD = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "username": "ada",
    "email": "ada@example.com",
    "password": "Secret123",
}


def _login(client, login: str, password: str = "Secret123"):
    return client.post("/auth/token", data={"username": login, "password": password})


def test_register_returns_user_without_password(client):
    response = client.post("/users/", json=USER_PAYLOAD)

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "ada"
    assert body["email"] == "ada@example.com"
    assert body["links"] == []
    assert "password" not in body


def test_register_rejects_duplicate_username_or_email(client):
    assert client.post("/users/", json=USER_PAYLOAD).status_code == 201

    same_username = client.post(
        "/users/", json={**USER_PAYLOAD, "email": "other@example.com"}
    )
    same_email = client.post("/users/", json={**USER_PAYLOAD, "username": "other"})

    assert same_username.status_code == 409
    assert same_email.status_code == 409


def test_register_rejects_blank_names(client):
    response = client.post("/users/", json={**USER_PAYLOAD, "first_name": "   "})

    assert response.status_code == 400
    assert response.json()["detail"] == "All fields are required."


def test_login_accepts_username_or_email(client):
    client.post("/users/", json=USER_PAYLOAD)

    by_username = _login(client, "ada")
    by_email = _login(client, "ada@example.com")

    assert by_username.status_code == 200
    assert by_email.status_code == 200
    body = by_email.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["username"] == "ada"


def test_login_reports_unknown_user_and_wrong_password(client):
    client.post("/users/", json=USER_PAYLOAD)

    assert _login(client, "nobody").status_code == 404
    assert _login(client, "ada", "wrong").status_code == 401


def test_me_requires_a_valid_token(client, make_user):
    user_id, headers = make_user("ada")

    assert client.get("/users/me", headers=headers).json()["id"] == user_id
    assert client.get("/users/me").status_code == 401
    assert (
        client.get("/users/me", headers={"Authorization": "Bearer garbage"}).status_code
        == 401
    )


def test_profile_update_changes_only_given_fields(client, make_user):
    _, headers = make_user("ada")

    response = client.put(
        "/users/me/profile",
        json={"bio": "Analyst", "links": ["https://example.com"]},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["bio"] == "Analyst"
    assert body["links"] == ["https://example.com"]
    assert body["about_me"] is None


def test_profile_update_without_fields_is_rejected(client, make_user):
    _, headers = make_user("ada")

    response = client.put("/users/me/profile", json={}, headers=headers)

    assert response.status_code == 400


def test_lookup_by_id_and_username(client, make_user):
    user_id, headers = make_user("ada")

    assert client.get(f"/users/{user_id}", headers=headers).json()["username"] == "ada"
    assert client.get("/users/username/ada", headers=headers).json()["id"] == user_id
    assert client.get("/users/999", headers=headers).status_code == 404
    assert client.get("/users/username/ghost", headers=headers).status_code == 404


def test_list_users(client, make_user):
    _, headers = make_user("ada")
    make_user("grace")

    usernames = {user["username"] for user in client.get("/users/", headers=headers).json()}

    assert usernames == {"ada", "grace"}


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
