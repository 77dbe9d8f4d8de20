"""
Application package initializer.

The API is split into ``core`` (configuration, logging, database and
security), ``schemas`` (pydantic payloads), ``services`` (business
logic over the SQLite tables) and ``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
