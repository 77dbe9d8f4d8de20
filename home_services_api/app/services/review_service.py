"""
Business logic for reviews.

Any authenticated user may review an existing service request.  There
is no uniqueness constraint: the same author can review the same
request several times.  Comments are HTML-escaped when returned.
"""

import html
import logging
import sqlite3
from typing import Any, Dict, List

from home_services_api.app.core.db import get_connection
from home_services_api.app.schemas.review import ReviewCreate, ReviewRead

logger = logging.getLogger(__name__)

REVIEW_COLUMNS = "id, request_id, author_id, rating, comment, created_at"


def _row_to_review(row: sqlite3.Row) -> ReviewRead:
    comment = html.escape(row["comment"]) if row["comment"] is not None else None
    return ReviewRead(
        id=row["id"],
        request_id=row["request_id"],
        author_id=row["author_id"],
        rating=row["rating"],
        comment=comment,
        created_at=row["created_at"],
    )


class ReviewService:
    """Service for the review log."""

    @classmethod
    async def create_review(cls, data: ReviewCreate, current_user: Dict[str, Any]) -> ReviewRead:
        """Store a review written by the caller.

        Raises ``LookupError("no_request")`` if the request does not
        exist.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            request = cursor.execute(
                "SELECT id FROM service_requests WHERE id = ?", (data.request_id,)
            ).fetchone()
            if not request:
                raise LookupError("no_request")
            cursor.execute(
                "INSERT INTO reviews (request_id, author_id, rating, comment) VALUES (?, ?, ?, ?)",
                (data.request_id, current_user["id"], data.rating, data.comment),
            )
            review_id = cursor.lastrowid
            conn.commit()
            logger.info(
                "User %s reviewed request %s with rating %s", current_user["id"], data.request_id, data.rating
            )
            row = cursor.execute(
                f"SELECT {REVIEW_COLUMNS} FROM reviews WHERE id = ?", (review_id,)
            ).fetchone()
            return _row_to_review(row)
        finally:
            conn.close()

    @classmethod
    async def list_reviews(cls, request_id: int, limit: int = 20, offset: int = 0) -> List[ReviewRead]:
        """List the reviews of a request, newest first."""
        conn = get_connection()
        try:
            exists = conn.execute("SELECT 1 FROM service_requests WHERE id = ?", (request_id,)).fetchone()
            if not exists:
                raise LookupError("no_request")
            rows = conn.execute(
                f"SELECT {REVIEW_COLUMNS} FROM reviews WHERE request_id = ? "
                "ORDER BY id DESC LIMIT ? OFFSET ?",
                (request_id, limit, offset),
            ).fetchall()
            return [_row_to_review(row) for row in rows]
        finally:
            conn.close()
