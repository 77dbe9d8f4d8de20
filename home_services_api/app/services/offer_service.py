"""
Business logic for offers.

Providers bid on open requests; the owning client accepts one bid.
Acceptance is the only multi-row state change in the system:

* the offer becomes ``accepted``;
* the request becomes ``accepted``;
* every other ``pending`` offer on the request becomes ``rejected``;
* a ``pending`` payment is appended to the settlement log.

All four happen inside one ``BEGIN IMMEDIATE`` transaction, so two
concurrent accepts on the same request are serialised and the second
one sees the request already closed.
"""

import logging
from typing import Any, Dict, List, Optional

from home_services_api.app.core.config import settings
from home_services_api.app.core.db import get_connection, transaction
from home_services_api.app.schemas.offer import AcceptOfferResponse, OfferCreate, OfferRead
from home_services_api.app.schemas.request import OPEN_STATUSES
from home_services_api.app.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

OFFER_COLUMNS = (
    "id, request_id, provider_id, price, estimated_arrival_min, notes, status, created_at, updated_at"
)


class OfferService:
    """Service for the offer book."""

    @staticmethod
    def compute_commission(price: float, percent: Optional[float] = None) -> float:
        """Return the platform commission for ``price``.

        ``percent`` defaults to ``settings.commission_percent``.
        """
        if percent is None:
            percent = settings.commission_percent
        return price * percent / 100

    @classmethod
    async def create_offer(cls, data: OfferCreate, current_user: Dict[str, Any]) -> OfferRead:
        """Create a pending offer and move its request to ``offered``.

        Raises ``LookupError("no_request")`` when the request does not
        exist and ``ValueError("request_closed")`` when it no longer
        takes offers.
        """
        with transaction() as cursor:
            request = cursor.execute(
                "SELECT id, status FROM service_requests WHERE id = ?", (data.request_id,)
            ).fetchone()
            if not request:
                raise LookupError("no_request")
            if request["status"] not in OPEN_STATUSES:
                raise ValueError("request_closed")
            cursor.execute(
                "INSERT INTO offers (request_id, provider_id, price, estimated_arrival_min, notes) "
                "VALUES (?, ?, ?, ?, ?)",
                (data.request_id, current_user["id"], data.price, data.estimated_arrival_min, data.notes),
            )
            offer_id = cursor.lastrowid
            cursor.execute(
                "UPDATE service_requests SET status = 'offered', updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (data.request_id,),
            )
            row = cursor.execute(f"SELECT {OFFER_COLUMNS} FROM offers WHERE id = ?", (offer_id,)).fetchone()
        logger.info(
            "Provider %s offered %.2f on request %s", current_user["id"], data.price, data.request_id
        )
        return OfferRead(**dict(row))

    @classmethod
    async def list_offers(cls, request_id: int) -> List[OfferRead]:
        """List the offers made on a request, cheapest first."""
        conn = get_connection()
        try:
            exists = conn.execute("SELECT 1 FROM service_requests WHERE id = ?", (request_id,)).fetchone()
            if not exists:
                raise LookupError("no_request")
            rows = conn.execute(
                f"SELECT {OFFER_COLUMNS} FROM offers WHERE request_id = ? ORDER BY price ASC, id ASC",
                (request_id,),
            ).fetchall()
            return [OfferRead(**dict(row)) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def accept_offer(cls, offer_id: int, current_user: Dict[str, Any]) -> AcceptOfferResponse:
        """Accept an offer on behalf of the request's owner.

        Errors, checked in this order:

        * ``LookupError("no_offer")`` – the offer does not exist;
        * ``PermissionError("not_owner")`` – the caller does not own the request;
        * ``ValueError("offer_not_pending")`` – the offer was already accepted or rejected;
        * ``ValueError("request_closed")`` – the request is past the offering stage.
        """
        with transaction() as cursor:
            offer = cursor.execute(
                f"SELECT {OFFER_COLUMNS} FROM offers WHERE id = ?", (offer_id,)
            ).fetchone()
            if not offer:
                raise LookupError("no_offer")
            request = cursor.execute(
                "SELECT id, client_id, status FROM service_requests WHERE id = ?",
                (offer["request_id"],),
            ).fetchone()
            if not request or request["client_id"] != current_user["id"]:
                raise PermissionError("not_owner")
            if offer["status"] != "pending":
                raise ValueError("offer_not_pending")
            if request["status"] not in OPEN_STATUSES:
                raise ValueError("request_closed")

            cursor.execute(
                "UPDATE offers SET status = 'accepted', updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (offer_id,),
            )
            cursor.execute(
                "UPDATE service_requests SET status = 'accepted', updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                (request["id"],),
            )
            rejected_ids = [
                r["id"]
                for r in cursor.execute(
                    "SELECT id FROM offers WHERE request_id = ? AND id != ? AND status = 'pending'",
                    (request["id"], offer_id),
                ).fetchall()
            ]
            if rejected_ids:
                cursor.execute(
                    "UPDATE offers SET status = 'rejected', updated_at = CURRENT_TIMESTAMP "
                    "WHERE request_id = ? AND id != ? AND status = 'pending'",
                    (request["id"], offer_id),
                )
            tx_id = TransactionService.record_payment(
                cursor, user_id=current_user["id"], amount=offer["price"], offer_id=offer_id
            )
            updated = cursor.execute(
                f"SELECT {OFFER_COLUMNS} FROM offers WHERE id = ?", (offer_id,)
            ).fetchone()

        percent = settings.commission_percent
        commission = cls.compute_commission(updated["price"], percent)
        logger.info(
            "Client %s accepted offer %s on request %s; rejected %s; commission %.2f",
            current_user["id"],
            offer_id,
            request["id"],
            rejected_ids,
            commission,
        )
        return AcceptOfferResponse(
            offer=OfferRead(**dict(updated)),
            commission=commission,
            commission_percent=percent,
            tx_id=tx_id,
            rejected_offer_ids=rejected_ids,
        )
