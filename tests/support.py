# Shared helpers for API tests.
# They register users, build bearer headers and create requests/offers
# through the public endpoints so each test reads as a short scenario.

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient


def register(
    client: TestClient,
    *,
    role: str = "client",
    phone: str,
    password: str = "secret-pass",
    full_name: str = "Test User",
    **extra: Any,
) -> dict[str, Any]:
    """Register a user and return the response body (token and user)."""
    response = client.post(
        "/auth/register",
        json={"full_name": full_name, "phone": phone, "password": password, "role": role, **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth(body: dict[str, Any]) -> dict[str, str]:
    return {"Authorization": f"Bearer {body['token']}"}


def create_request(client: TestClient, owner: dict[str, Any], **fields: Any) -> dict[str, Any]:
    payload = {"type": "plumbing", "description": "Leaking sink", "location": "Riyadh", **fields}
    response = client.post("/requests", json=payload, headers=auth(owner))
    assert response.status_code == 201, response.text
    return response.json()


def create_offer(
    client: TestClient, provider: dict[str, Any], request_id: int, price: float = 200.0
) -> dict[str, Any]:
    response = client.post(
        "/offers",
        json={"request_id": request_id, "price": price, "estimated_arrival_min": 30},
        headers=auth(provider),
    )
    assert response.status_code == 201, response.text
    return response.json()
