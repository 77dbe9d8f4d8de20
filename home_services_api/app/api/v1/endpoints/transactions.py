"""
Settlement log endpoints for API v1.

Users see their own settlement records; administrators see all of
them.
"""

from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from home_services_api.app.core.security import get_current_user
from home_services_api.app.schemas.transaction import TransactionRead
from home_services_api.app.services.transaction_service import TransactionService


router = APIRouter()


@router.get("/transactions", response_model=List[TransactionRead])
async def list_transactions(
    status_param: Optional[Literal["pending", "completed", "failed"]] = Query(None, alias="status"),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> List[TransactionRead]:
    return await TransactionService.list_transactions(
        current_user, status=status_param, limit=limit, offset=offset
    )
