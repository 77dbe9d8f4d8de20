"""Registration, login and token handling through the HTTP API."""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from home_services_api.app.core.db import get_connection
from home_services_api.app.core.security import create_access_token
from home_services_api.app.schemas.user import RegisterRequest
from home_services_api.app.services.user_service import UserService
from tests.support import auth, register


def test_register_returns_token_and_brief_user(client: TestClient) -> None:
    body = register(client, role="provider", phone="+1", full_name="Omar", city="Jeddah")

    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["user"]["full_name"] == "Omar"
    assert body["user"]["role"] == "provider"
    assert set(body["user"]) == {"id", "full_name", "role"}


def test_register_defaults_role_to_client(client: TestClient) -> None:
    response = client.post("/auth/register", json={"full_name": "A", "phone": "+1", "password": "pw"})

    assert response.status_code == 201
    assert response.json()["user"]["role"] == "client"


def test_register_reports_missing_fields(client: TestClient) -> None:
    response = client.post("/auth/register", json={"phone": "+1", "password": "pw"})

    assert response.status_code == 400
    assert response.json()["detail"] == "missing_fields"


def test_register_rejects_duplicate_phone(client: TestClient) -> None:
    register(client, phone="+1")
    response = client.post("/auth/register", json={"full_name": "B", "phone": "+1", "password": "pw"})

    assert response.status_code == 400
    assert response.json()["detail"] == "create_failed"


def test_only_first_account_may_be_admin(client: TestClient, admin: dict) -> None:
    response = client.post(
        "/auth/register",
        json={"full_name": "Mallory", "phone": "+999", "password": "pw", "role": "admin"},
    )

    assert admin["user"]["role"] == "admin"
    assert response.status_code == 403
    assert response.json()["detail"] == "admin_registration_closed"


def test_login_with_valid_credentials(client: TestClient) -> None:
    registered = register(client, phone="+1", password="open-sesame")

    response = client.post("/auth/login", json={"phone": "+1", "password": "open-sesame"})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered["user"]["id"]


def test_login_rejects_wrong_password_and_unknown_phone(client: TestClient) -> None:
    register(client, phone="+1", password="open-sesame")

    wrong = client.post("/auth/login", json={"phone": "+1", "password": "nope"})
    unknown = client.post("/auth/login", json={"phone": "+2", "password": "open-sesame"})

    assert wrong.status_code == 401
    assert wrong.json()["detail"] == "invalid_credentials"
    assert unknown.status_code == 401
    assert unknown.json()["detail"] == "invalid_credentials"


def test_me_returns_profile_without_password(client: TestClient) -> None:
    body = register(client, phone="+1", email="a@example.com", service_types="cleaning")

    response = client.get("/auth/me", headers=auth(body))

    assert response.status_code == 200
    profile = response.json()
    assert profile["phone"] == "+1"
    assert profile["email"] == "a@example.com"
    assert profile["service_types"] == "cleaning"
    assert "password_hash" not in profile


def test_protected_route_requires_token(client: TestClient) -> None:
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.json()["detail"] == "no_token"


def test_protected_route_rejects_garbage_token(client: TestClient) -> None:
    response = client.get("/auth/me", headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 401
    assert response.json()["detail"] == "invalid_token"


def test_token_for_deleted_user_is_rejected(client: TestClient) -> None:
    token = create_access_token({"id": 4242, "role": "client"})

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "invalid_token"


def test_simultaneous_first_registrations_make_one_admin() -> None:
    attempts = 8
    barrier = threading.Barrier(attempts)

    def register_admin(n: int) -> str:
        data = RegisterRequest(full_name=f"Admin {n}", phone=f"+90{n}", password="pw", role="admin")
        barrier.wait()
        try:
            asyncio.run(UserService.create_user(data))
        except PermissionError as e:
            return str(e)
        return "ok"

    with ThreadPoolExecutor(max_workers=attempts) as pool:
        results = list(pool.map(register_admin, range(attempts)))

    assert results.count("ok") == 1
    assert results.count("admin_registration_closed") == attempts - 1
    conn = get_connection()
    try:
        admins = conn.execute("SELECT COUNT(*) FROM users WHERE role = 'admin'").fetchone()[0]
    finally:
        conn.close()
    assert admins == 1
