"""
Business logic for users.

``UserService`` registers users, checks credentials and looks users up
by id.  Passwords are stored as PBKDF2 hashes (see ``core.security``).
"""

import logging
import sqlite3
from typing import Any, Dict, Optional

from home_services_api.app.core.db import get_connection, transaction
from home_services_api.app.core.security import hash_password, verify_password
from home_services_api.app.schemas.user import RegisterRequest, UserRead

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, full_name, phone, email, role, city, service_types, created_at"


class UserService:
    """Service for registering and looking up users."""

    @classmethod
    async def create_user(cls, data: RegisterRequest) -> UserRead:
        """Create a new user.

        The role defaults to ``client``.  ``admin`` is granted only to
        the first account ever created; afterwards it raises
        ``PermissionError("admin_registration_closed")``.  A phone
        number that is already registered raises
        ``ValueError("create_failed")``.
        """
        role = data.role or "client"
        password_hash = hash_password(data.password)
        # The emptiness check and the insert share one write lock, so only
        # one of several simultaneous first registrations can be admin.
        try:
            with transaction() as cursor:
                if role == "admin":
                    row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
                    if row["count"] > 0:
                        raise PermissionError("admin_registration_closed")
                cursor.execute(
                    "INSERT INTO users (full_name, phone, email, password_hash, role, city, service_types) "
                    "VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (
                        data.full_name,
                        data.phone,
                        data.email,
                        password_hash,
                        role,
                        data.city,
                        data.service_types,
                    ),
                )
                user_id = cursor.lastrowid
                row = cursor.execute(
                    f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
                ).fetchone()
        except sqlite3.IntegrityError as e:
            logger.warning("Failed to register %s: %s", data.phone, e)
            raise ValueError("create_failed") from e
        logger.info("Registered user %s with role %s", user_id, role)
        return UserRead(**dict(row))

    @classmethod
    async def authenticate(cls, phone: str, password: str) -> Optional[UserRead]:
        """Return the user matching ``phone`` and ``password``, else ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {USER_COLUMNS}, password_hash FROM users WHERE phone = ?",
                (phone,),
            ).fetchone()
        finally:
            conn.close()
        if not row or not verify_password(password, row["password_hash"]):
            return None
        data = dict(row)
        data.pop("password_hash")
        return UserRead(**data)

    @staticmethod
    def get_user_row(user_id: Any) -> Optional[Dict[str, Any]]:
        """Load a user as a plain dict, or ``None`` if it does not exist.

        Synchronous so the authentication dependency can call it
        directly.
        """
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def get_user(cls, user_id: int) -> UserRead:
        row = cls.get_user_row(user_id)
        if row is None:
            raise LookupError("no_user")
        return UserRead(**row)
