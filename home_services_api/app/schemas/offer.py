"""
Pydantic models for offers and offer acceptance.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

OfferStatus = Literal["pending", "accepted", "rejected"]


class OfferCreate(BaseModel):
    """Schema for a provider's bid on a service request.

    ``request_id`` and ``price`` are required; the endpoint reports a
    missing one as ``missing_fields``.
    """

    request_id: Optional[int] = Field(None, examples=[1])
    price: Optional[float] = Field(None, examples=[150.0])
    estimated_arrival_min: Optional[int] = Field(None, ge=0, examples=[30])
    notes: Optional[str] = Field(None, examples=["Can bring spare parts"])


class OfferRead(BaseModel):
    id: int
    request_id: int
    provider_id: int
    price: float
    estimated_arrival_min: Optional[int] = None
    notes: Optional[str] = None
    status: OfferStatus
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }


class AcceptOfferResponse(BaseModel):
    """Result of accepting an offer.

    ``commission`` is the platform's cut of the offer price.  It is
    reported here only and not stored as a transaction of its own.
    """

    offer: OfferRead
    commission: float
    commission_percent: float
    tx_id: int
    rejected_offer_ids: List[int] = Field(default_factory=list)
