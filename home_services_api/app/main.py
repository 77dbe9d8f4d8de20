"""
Main entrypoint for the Home Services API.

This module assembles the FastAPI application, sets up logging, CORS
and the versioned routers.  ``create_app`` builds and configures the
app, which is then instantiated at import time as ``app`` so it can be
served directly::

    uvicorn home_services_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application; the database is migrated on startup.
    """
    setup_logging(
        settings.log_level,
        settings.log_file or None,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        access_level=settings.log_access_level,
    )

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()
        logger.info("Database ready at %s", get_database_path())

    return app


app = create_app()
