"""Entry point for serving the Home Services API.

Launches the FastAPI application with uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``4000``); all other configuration comes from the
variables documented in ``home_services_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from home_services_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "4000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("API listening on %s:%s", host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
