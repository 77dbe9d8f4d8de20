"""
Service request endpoints for API v1.

Clients post requests, anyone signed in can browse them, and providers
mark them completed.  Offers and reviews of a single request are
listed from here as well.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from home_services_api.app.core.security import get_current_user, require_roles
from home_services_api.app.schemas.offer import OfferRead
from home_services_api.app.schemas.request import (
    REQUEST_STATUSES,
    CompleteResponse,
    RequestCreate,
    RequestRead,
)
from home_services_api.app.schemas.review import ReviewRead
from home_services_api.app.services.offer_service import OfferService
from home_services_api.app.services.request_service import RequestService
from home_services_api.app.services.review_service import ReviewService


router = APIRouter()


@router.post("/requests", response_model=RequestRead, status_code=status.HTTP_201_CREATED)
async def create_request(
    data: RequestCreate,
    current_user: Dict[str, Any] = Depends(require_roles("client", detail="only_clients")),
) -> RequestRead:
    """Create a service request.  Only clients may call this endpoint."""
    if not data.type:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing_fields")
    return await RequestService.create_request(data, current_user)


@router.get("/requests", response_model=List[RequestRead])
async def list_requests(
    status_param: Optional[str] = Query(None, alias="status", description="Filter by request status"),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> List[RequestRead]:
    """List requests with their owning client, newest first."""
    if status_param and status_param not in REQUEST_STATUSES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid_status")
    return await RequestService.list_requests(status=status_param, limit=limit, offset=offset)


@router.get("/requests/{request_id}", response_model=RequestRead)
async def get_request(
    request_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> RequestRead:
    try:
        return await RequestService.get_request(request_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/requests/{request_id}/offers", response_model=List[OfferRead])
async def list_request_offers(
    request_id: int,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> List[OfferRead]:
    """List the offers made on a request, cheapest first."""
    try:
        return await OfferService.list_offers(request_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/requests/{request_id}/reviews", response_model=List[ReviewRead])
async def list_request_reviews(
    request_id: int,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> List[ReviewRead]:
    try:
        return await ReviewService.list_reviews(request_id, limit=limit, offset=offset)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/requests/{request_id}/complete", response_model=CompleteResponse)
async def complete_request(
    request_id: int,
    current_user: Dict[str, Any] = Depends(require_roles("provider", detail="forbidden")),
) -> CompleteResponse:
    """Mark a request completed.

    Any provider may complete any request, whatever its status.
    """
    try:
        await RequestService.complete_request(request_id, current_user)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CompleteResponse(ok=True)
