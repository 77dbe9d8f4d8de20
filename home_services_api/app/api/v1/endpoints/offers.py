"""
Offer endpoints for API v1.

Providers submit priced offers against open requests; the client who
owns a request accepts one of them.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Path, status

from home_services_api.app.core.security import get_current_user, require_roles
from home_services_api.app.schemas.offer import AcceptOfferResponse, OfferCreate, OfferRead
from home_services_api.app.services.offer_service import OfferService


router = APIRouter()


@router.post("/offers", response_model=OfferRead, status_code=status.HTTP_201_CREATED)
async def create_offer(
    data: OfferCreate,
    current_user: Dict[str, Any] = Depends(require_roles("provider", detail="only_providers")),
) -> OfferRead:
    """Submit an offer.  Only providers may call this endpoint.

    The request must still be ``new`` or ``offered``; it moves to
    ``offered``.
    """
    if data.request_id is None or data.price is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing_fields")
    if data.price <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid_price")
    try:
        return await OfferService.create_offer(data, current_user)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/offers/{offer_id}/accept", response_model=AcceptOfferResponse)
async def accept_offer(
    offer_id: int = Path(..., description="ID of the offer to accept"),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> AcceptOfferResponse:
    """Accept an offer on a request the caller owns.

    Sets the offer and the request to ``accepted``, rejects the other
    pending offers and records a pending payment.  The platform
    commission is returned alongside.
    """
    try:
        return await OfferService.accept_offer(offer_id, current_user)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
