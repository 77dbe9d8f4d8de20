"""
Review endpoints for API v1.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from home_services_api.app.core.security import get_current_user
from home_services_api.app.schemas.review import ReviewCreate, ReviewRead
from home_services_api.app.services.review_service import ReviewService


router = APIRouter()


@router.post(
    "/reviews",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(
    data: ReviewCreate,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> ReviewRead:
    """Review a service request.  The request must exist."""
    if data.request_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing_fields")
    try:
        return await ReviewService.create_review(data, current_user)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
