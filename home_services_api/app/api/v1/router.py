"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  Every endpoint module
declares its full paths (``/auth/...``, ``/requests/...``) so no prefix
is added here; the application mounts the whole router under
``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import (
    admin,
    auth,
    health,
    offers,
    requests,
    reviews,
    transactions,
)

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(requests.router, tags=["requests"])
router.include_router(offers.router, tags=["offers"])
router.include_router(reviews.router, tags=["reviews"])
router.include_router(transactions.router, tags=["transactions"])
router.include_router(admin.router, tags=["admin"])
