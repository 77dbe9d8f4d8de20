"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts in a development setup without any environment at all.  In
a production deployment you should at least override ``SECRET_KEY``
and ``DATABASE_URL``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Home Services API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Prefix under which all routes are mounted, e.g. "/api/v1".  Empty
    # by default so paths read ``/auth/login``, ``/requests`` etc.
    api_prefix: str = os.getenv("API_PREFIX", "")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    log_max_bytes: int = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
    log_backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "3"))
    log_access_level: str = os.getenv("LOG_ACCESS_LEVEL", "INFO")

    # JWT_SECRET is accepted for compatibility with older deployments.
    secret_key: str = os.getenv("SECRET_KEY", os.getenv("JWT_SECRET", "dev"))
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "home_services.db")

    # Platform commission taken from every accepted offer, in percent.
    commission_percent: float = float(os.getenv("APP_COMMISSION_PERCENT", "10"))

    # Comma-separated list of origins allowed by CORS.  "*" allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
