"""
Liveness endpoint.
"""

from typing import Dict

from fastapi import APIRouter

from home_services_api.app.core.config import settings

router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok", "version": settings.api_version}
