"""
Shared test configuration.

Every test gets its own SQLite file, migrated from scratch, and a
``TestClient`` bound to the application.  User fixtures register one
account per role through the public API.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from home_services_api.app.core.config import settings  # noqa: E402
from home_services_api.app.core.db import init_db  # noqa: E402
from home_services_api.app.main import app  # noqa: E402
from tests.support import register  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings at a fresh database file and migrate it."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    monkeypatch.setattr(settings, "commission_percent", 10.0)
    init_db()
    return db_path


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin(client: TestClient) -> dict[str, Any]:
    return register(client, role="admin", phone="+100", full_name="Admin")


@pytest.fixture
def client_user(client: TestClient, admin: dict[str, Any]) -> dict[str, Any]:
    return register(client, role="client", phone="+200", full_name="Client One")


@pytest.fixture
def other_client(client: TestClient, admin: dict[str, Any]) -> dict[str, Any]:
    return register(client, role="client", phone="+201", full_name="Client Two")


@pytest.fixture
def provider(client: TestClient, admin: dict[str, Any]) -> dict[str, Any]:
    return register(client, role="provider", phone="+300", full_name="Provider One", service_types="plumbing")


@pytest.fixture
def other_provider(client: TestClient, admin: dict[str, Any]) -> dict[str, Any]:
    return register(client, role="provider", phone="+301", full_name="Provider Two")
