"""The password reset command-line tool."""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

import reset_password
from tests.support import register


def test_reset_password_updates_hash(client: TestClient, isolated_db: Path) -> None:
    register(client, phone="+1", password="old-password")

    code = reset_password.main(["--db", str(isolated_db), "--phone", "+1", "--password", "new-password"])

    assert code == 0
    assert client.post("/auth/login", json={"phone": "+1", "password": "old-password"}).status_code == 401
    assert client.post("/auth/login", json={"phone": "+1", "password": "new-password"}).status_code == 200


def test_reset_password_unknown_phone(isolated_db: Path) -> None:
    code = reset_password.main(["--db", str(isolated_db), "--phone", "+404", "--password", "x"])

    assert code == 2


def test_reset_password_missing_db(tmp_path: Path) -> None:
    code = reset_password.main(["--db", str(tmp_path / "nope.db"), "--phone", "+1", "--password", "x"])

    assert code == 1
