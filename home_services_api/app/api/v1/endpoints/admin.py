"""
Administrator endpoints for API v1.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from home_services_api.app.core.security import require_roles
from home_services_api.app.schemas.statistics import StatsRead
from home_services_api.app.services.statistics_service import StatisticsService


router = APIRouter()


@router.get("/admin/stats", response_model=StatsRead)
async def get_stats(
    current_user: Dict[str, Any] = Depends(require_roles("admin", detail="admin_only")),
) -> StatsRead:
    """Return platform-wide counts.  Administrators only."""
    return await StatisticsService.overview()
