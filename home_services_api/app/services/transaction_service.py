"""
Settlement log.

Accepting an offer appends a ``payment`` row in status ``pending``.
There is no payment-gateway integration, so nothing ever moves a row
out of ``pending``; the log is a record of money owed.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from home_services_api.app.core.db import get_connection
from home_services_api.app.schemas.transaction import TransactionRead

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for appending and listing settlement records."""

    @staticmethod
    def record_payment(cursor: sqlite3.Cursor, user_id: int, amount: float, offer_id: Optional[int] = None) -> int:
        """Append a pending payment row using the caller's cursor.

        Runs inside whatever transaction the cursor belongs to, so the
        row is committed or rolled back together with the state change
        that produced it.  Returns the new row id.
        """
        cursor.execute(
            "INSERT INTO transactions (user_id, offer_id, amount, type, status) "
            "VALUES (?, ?, ?, 'payment', 'pending')",
            (user_id, offer_id, amount),
        )
        tx_id = cursor.lastrowid
        logger.info("Pending payment %s of %.2f recorded for user %s", tx_id, amount, user_id)
        return tx_id

    @classmethod
    async def list_transactions(
        cls,
        current_user: Dict[str, Any],
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[TransactionRead]:
        """List settlement records, newest first.

        Administrators see every row; other users only their own.
        """
        conn = get_connection()
        try:
            params: list = []
            where_clauses: list[str] = []
            if current_user.get("role") != "admin":
                where_clauses.append("user_id = ?")
                params.append(current_user["id"])
            if status:
                where_clauses.append("status = ?")
                params.append(status)
            query = "SELECT id, user_id, offer_id, amount, type, status, created_at FROM transactions"
            if where_clauses:
                query += " WHERE " + " AND ".join(where_clauses)
            query += " ORDER BY id DESC LIMIT ? OFFSET ?"
            params.extend([limit, offset])
            rows = conn.execute(query, tuple(params)).fetchall()
            return [TransactionRead(**dict(row)) for row in rows]
        finally:
            conn.close()
