"""Admin statistics, the settlement log listing and the health check."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.support import auth, create_offer, create_request


def test_stats_require_admin(client: TestClient, client_user: dict) -> None:
    response = client.get("/admin/stats", headers=auth(client_user))

    assert response.status_code == 403
    assert response.json()["detail"] == "admin_only"


def test_stats_count_marketplace_activity(
    client: TestClient, admin: dict, client_user: dict, provider: dict, other_provider: dict
) -> None:
    first = create_request(client, client_user)
    create_request(client, client_user)
    offer = create_offer(client, provider, first["id"], price=120)
    create_offer(client, other_provider, first["id"], price=140)
    client.post(f"/offers/{offer['id']}/accept", headers=auth(client_user))
    client.post("/reviews", json={"request_id": first["id"], "rating": 5}, headers=auth(client_user))

    stats = client.get("/admin/stats", headers=auth(admin)).json()

    assert stats["users_count"] == 4
    assert stats["requests_count"] == 2
    assert stats["offers_count"] == 2
    assert stats["transactions_count"] == 1
    assert stats["reviews_count"] == 1
    assert stats["pending_amount"] == pytest.approx(120.0)
    assert stats["requests_by_status"]["accepted"] == 1
    assert stats["requests_by_status"]["new"] == 1
    assert stats["requests_by_status"]["cancelled"] == 0


def test_transactions_are_scoped_to_owner(
    client: TestClient, admin: dict, client_user: dict, other_client: dict, provider: dict
) -> None:
    request = create_request(client, client_user)
    offer = create_offer(client, provider, request["id"])
    client.post(f"/offers/{offer['id']}/accept", headers=auth(client_user))

    own = client.get("/transactions", headers=auth(client_user)).json()
    others = client.get("/transactions", headers=auth(other_client)).json()
    everything = client.get("/transactions", params={"status": "pending"}, headers=auth(admin)).json()

    assert len(own) == 1
    assert others == []
    assert [t["id"] for t in everything] == [own[0]["id"]]


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
