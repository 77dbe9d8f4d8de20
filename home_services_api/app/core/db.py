"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` for services, a ``transaction``
context manager for multi-statement state changes, and ``init_db``
which applies the versioned migrations on application start.  Applied
versions are stored in the ``migrations`` table and new migrations
are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial marketplace schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            full_name TEXT NOT NULL,
            phone TEXT NOT NULL UNIQUE,
            email TEXT,
            password_hash TEXT NOT NULL,
            role TEXT NOT NULL DEFAULT 'client'
                CHECK (role IN ('client', 'provider', 'admin')),
            city TEXT,
            service_types TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS service_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            type TEXT NOT NULL,
            description TEXT,
            location TEXT,
            preferred_time TEXT,
            status TEXT NOT NULL DEFAULT 'new'
                CHECK (status IN ('new', 'offered', 'accepted', 'in_progress', 'completed', 'cancelled')),
            client_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(client_id) REFERENCES users(id)
        );

        CREATE TABLE IF NOT EXISTS offers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id INTEGER NOT NULL,
            provider_id INTEGER NOT NULL,
            price REAL NOT NULL,
            estimated_arrival_min INTEGER,
            notes TEXT,
            status TEXT NOT NULL DEFAULT 'pending'
                CHECK (status IN ('pending', 'accepted', 'rejected')),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(request_id) REFERENCES service_requests(id),
            FOREIGN KEY(provider_id) REFERENCES users(id)
        );

        CREATE TABLE IF NOT EXISTS transactions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            amount REAL NOT NULL,
            type TEXT NOT NULL
                CHECK (type IN ('payment', 'commission', 'payout')),
            status TEXT NOT NULL DEFAULT 'pending'
                CHECK (status IN ('pending', 'completed', 'failed')),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );

        CREATE TABLE IF NOT EXISTS reviews (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id INTEGER NOT NULL,
            author_id INTEGER NOT NULL,
            rating INTEGER NOT NULL,
            comment TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(request_id) REFERENCES service_requests(id),
            FOREIGN KEY(author_id) REFERENCES users(id)
        );
        """,
    ),
    # Migration 2: link settlement rows to the offer that produced them
    (
        2,
        """
        ALTER TABLE transactions ADD COLUMN offer_id INTEGER REFERENCES offers(id);
        """,
    ),
    # Migration 3: indices on foreign keys used by list endpoints
    (
        3,
        """
        CREATE INDEX IF NOT EXISTS idx_service_requests_status ON service_requests(status);
        CREATE INDEX IF NOT EXISTS idx_offers_request_id ON offers(request_id);
        CREATE INDEX IF NOT EXISTS idx_transactions_user_id ON transactions(user_id);
        CREATE INDEX IF NOT EXISTS idx_reviews_request_id ON reviews(request_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths from ``settings.database_url`` are used as is;
    relative ones are resolved against the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # home_services_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection since SQLite disables it by default.
    """
    conn = sqlite3.connect(get_database_path(), timeout=30)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


@contextmanager
def transaction() -> Iterator[sqlite3.Cursor]:
    """Run a block inside a single write transaction.

    ``BEGIN IMMEDIATE`` takes the database write lock up front, so a
    read-check-write sequence inside the block cannot interleave with
    another writer.  The transaction is committed when the block exits
    normally and rolled back on any exception.
    """
    conn = get_connection()
    try:
        conn.execute("BEGIN IMMEDIATE")
        cursor = conn.cursor()
        try:
            yield cursor
        except BaseException:
            conn.rollback()
            raise
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if needed, reads the current
    schema version and runs every migration with a higher version.
    Append new migrations to ``MIGRATIONS`` with an incremented
    version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
