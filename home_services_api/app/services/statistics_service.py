"""
Service layer for administrator statistics.

All queries are read-only counts and sums over the marketplace tables.
"""

from __future__ import annotations

from home_services_api.app.core.db import get_connection
from home_services_api.app.schemas.request import REQUEST_STATUSES
from home_services_api.app.schemas.statistics import StatsRead


class StatisticsService:
    """Service providing aggregated statistics for administrators."""

    @classmethod
    async def overview(cls) -> StatsRead:
        """Return high-level platform metrics.

        ``pending_amount`` is the total of settlement rows still in
        ``pending``; ``requests_by_status`` lists every known status,
        including the ones with no requests.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            users_count = cursor.execute("SELECT COUNT(*) FROM users").fetchone()[0]
            requests_count = cursor.execute("SELECT COUNT(*) FROM service_requests").fetchone()[0]
            offers_count = cursor.execute("SELECT COUNT(*) FROM offers").fetchone()[0]
            transactions_count = cursor.execute("SELECT COUNT(*) FROM transactions").fetchone()[0]
            reviews_count = cursor.execute("SELECT COUNT(*) FROM reviews").fetchone()[0]
            pending_amount = cursor.execute(
                "SELECT COALESCE(SUM(amount), 0) FROM transactions WHERE status = 'pending'"
            ).fetchone()[0]
            by_status = {status: 0 for status in REQUEST_STATUSES}
            for row in cursor.execute(
                "SELECT status, COUNT(*) AS count FROM service_requests GROUP BY status"
            ).fetchall():
                by_status[row["status"]] = row["count"]
            return StatsRead(
                users_count=users_count,
                requests_count=requests_count,
                offers_count=offers_count,
                transactions_count=transactions_count,
                reviews_count=reviews_count,
                pending_amount=float(pending_amount),
                requests_by_status=by_status,
            )
        finally:
            conn.close()
