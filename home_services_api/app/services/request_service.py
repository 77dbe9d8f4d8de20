"""
Business logic for service requests.

Clients create requests; anyone authenticated can browse them.  A
provider can mark any request completed: the only check is the
caller's role, applied in the endpoint.  Transitions made by offers
live in ``offer_service``.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from home_services_api.app.core.db import get_connection, transaction
from home_services_api.app.schemas.request import ClientBrief, RequestCreate, RequestRead

logger = logging.getLogger(__name__)

REQUEST_SELECT = (
    "SELECT r.id, r.type, r.description, r.location, r.preferred_time, r.status, "
    "r.client_id, r.created_at, r.updated_at, "
    "u.full_name AS client_full_name, u.phone AS client_phone "
    "FROM service_requests r LEFT JOIN users u ON u.id = r.client_id"
)


def _row_to_request(row: sqlite3.Row) -> RequestRead:
    client = None
    if row["client_full_name"] is not None:
        client = ClientBrief(id=row["client_id"], full_name=row["client_full_name"], phone=row["client_phone"])
    return RequestRead(
        id=row["id"],
        type=row["type"],
        description=row["description"],
        location=row["location"],
        preferred_time=row["preferred_time"],
        status=row["status"],
        client_id=row["client_id"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        client=client,
    )


class RequestService:
    """Service for the request ledger."""

    @classmethod
    async def create_request(cls, data: RequestCreate, current_user: Dict[str, Any]) -> RequestRead:
        """Insert a new request in status ``new`` owned by the caller."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO service_requests (type, description, location, preferred_time, client_id) "
                "VALUES (?, ?, ?, ?, ?)",
                (data.type, data.description, data.location, data.preferred_time, current_user["id"]),
            )
            request_id = cursor.lastrowid
            conn.commit()
            logger.info("Client %s created request %s (%s)", current_user["id"], request_id, data.type)
            row = cursor.execute(f"{REQUEST_SELECT} WHERE r.id = ?", (request_id,)).fetchone()
            return _row_to_request(row)
        finally:
            conn.close()

    @classmethod
    async def list_requests(
        cls,
        status: Optional[str] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[RequestRead]:
        """List requests newest first, optionally filtered by status."""
        conn = get_connection()
        try:
            params: list = []
            query = REQUEST_SELECT
            if status:
                query += " WHERE r.status = ?"
                params.append(status)
            query += " ORDER BY r.id DESC LIMIT ? OFFSET ?"
            params.extend([limit, offset])
            rows = conn.execute(query, tuple(params)).fetchall()
            return [_row_to_request(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_request(cls, request_id: int) -> RequestRead:
        conn = get_connection()
        try:
            row = conn.execute(f"{REQUEST_SELECT} WHERE r.id = ?", (request_id,)).fetchone()
        finally:
            conn.close()
        if not row:
            raise LookupError("no_request")
        return _row_to_request(row)

    @classmethod
    async def complete_request(cls, request_id: int, current_user: Dict[str, Any]) -> None:
        """Mark a request ``completed`` whatever its current status.

        Raises ``LookupError("no_request")`` if the request does not
        exist.  The caller's role has already been checked.
        """
        with transaction() as cursor:
            row = cursor.execute(
                "SELECT id, status FROM service_requests WHERE id = ?", (request_id,)
            ).fetchone()
            if not row:
                raise LookupError("no_request")
            cursor.execute(
                "UPDATE service_requests SET status = 'completed', updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (request_id,),
            )
        logger.info(
            "Provider %s completed request %s (was %s)", current_user["id"], request_id, row["status"]
        )
