"""Posting and listing reviews."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.support import auth, create_request


def test_client_posts_review(client: TestClient, client_user: dict) -> None:
    request = create_request(client, client_user)

    response = client.post(
        "/reviews",
        json={"request_id": request["id"], "rating": 5, "comment": "  Quick and tidy  "},
        headers=auth(client_user),
    )

    assert response.status_code == 201
    review = response.json()
    assert review["author_id"] == client_user["user"]["id"]
    assert review["rating"] == 5
    assert review["comment"] == "Quick and tidy"


def test_same_author_may_review_twice(client: TestClient, client_user: dict) -> None:
    request = create_request(client, client_user)
    for rating in (4, 2):
        client.post("/reviews", json={"request_id": request["id"], "rating": rating}, headers=auth(client_user))

    reviews = client.get(f"/requests/{request['id']}/reviews", headers=auth(client_user)).json()

    assert [r["rating"] for r in reviews] == [2, 4]


def test_review_comment_is_escaped_on_read(client: TestClient, client_user: dict) -> None:
    request = create_request(client, client_user)

    review = client.post(
        "/reviews",
        json={"request_id": request["id"], "rating": 3, "comment": "<b>ok</b>"},
        headers=auth(client_user),
    ).json()

    assert review["comment"] == "&lt;b&gt;ok&lt;/b&gt;"


def test_review_rating_out_of_range_is_rejected(client: TestClient, client_user: dict) -> None:
    request = create_request(client, client_user)

    response = client.post("/reviews", json={"request_id": request["id"], "rating": 6}, headers=auth(client_user))

    assert response.status_code == 422


def test_review_for_missing_request_is_404(client: TestClient, client_user: dict) -> None:
    response = client.post("/reviews", json={"request_id": 999, "rating": 4}, headers=auth(client_user))

    assert response.status_code == 404
    assert response.json()["detail"] == "no_request"


def test_listing_reviews_of_missing_request_is_404(client: TestClient, client_user: dict) -> None:
    response = client.get("/requests/999/reviews", headers=auth(client_user))

    assert response.status_code == 404


def test_review_without_request_id_reports_missing_fields(client: TestClient, client_user: dict) -> None:
    response = client.post("/reviews", json={"rating": 4}, headers=auth(client_user))

    assert response.status_code == 400
    assert response.json()["detail"] == "missing_fields"
