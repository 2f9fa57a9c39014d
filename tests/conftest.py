"""Shared fixtures: a throwaway SQLite database and API helpers."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "linkup_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["LOG_LEVEL"] = "WARNING"

from linkup.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from linkup.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(client: TestClient) -> Callable[..., tuple[int, dict[str, str]]]:
    """Register a user, log in and return ``(user_id, auth_headers)``."""

    def _make_user(
        username: str,
        *,
        first_name: str = "Test",
        last_name: str = "User",
        password: str = "Secret123",
    ) -> tuple[int, dict[str, str]]:
        response = client.post(
            "/users/",
            json={
                "first_name": first_name,
                "last_name": last_name,
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]

        token_response = client.post(
            "/auth/token", data={"username": username, "password": password}
        )
        assert token_response.status_code == 200, token_response.text
        token = token_response.json()["access_token"]
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make_user
