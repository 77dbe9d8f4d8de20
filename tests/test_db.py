"""Migrations and the write-transaction helper."""

from __future__ import annotations

import pytest

from home_services_api.app.core.db import MIGRATIONS, get_connection, init_db, transaction


def test_init_db_is_idempotent() -> None:
    init_db()

    conn = get_connection()
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
        columns = {row["name"] for row in conn.execute("PRAGMA table_info(transactions)")}
    finally:
        conn.close()

    assert versions == [version for version, _ in MIGRATIONS]
    assert "offer_id" in columns


def test_transaction_rolls_back_on_error() -> None:
    with pytest.raises(RuntimeError):
        with transaction() as cursor:
            cursor.execute(
                "INSERT INTO users (full_name, phone, password_hash) VALUES ('X', '+1', 'h')"
            )
            raise RuntimeError("boom")

    conn = get_connection()
    try:
        assert conn.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 0
    finally:
        conn.close()


def test_transaction_commits_on_success() -> None:
    with transaction() as cursor:
        cursor.execute("INSERT INTO users (full_name, phone, password_hash) VALUES ('X', '+1', 'h')")

    conn = get_connection()
    try:
        assert conn.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 1
    finally:
        conn.close()
