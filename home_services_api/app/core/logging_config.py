"""
Logging configuration for the application.

Records go to the console and, when a log file is configured, to a
size-rotated file next to it (``home_services.log``, ``.log.1``, ...).
uvicorn's access log gets its own level so request lines can be
silenced without hiding service messages.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ACCESS_LOGGER = "uvicorn.access"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _rotating_file_handler(logfile: str, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    path = Path(logfile).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    access_level: str = "INFO",
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Root level name, e.g. ``"DEBUG"``.  Unknown names mean ``INFO``.
    logfile : Optional[str]
        File to mirror records into.  Rotated at ``max_bytes`` keeping
        ``backup_count`` old files.
    access_level : str
        Level for uvicorn's per-request access lines.

    Does nothing if the root logger already has handlers (tests build
    the app more than once).
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(_level(level))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(_rotating_file_handler(logfile, max_bytes, backup_count))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(ACCESS_LOGGER).setLevel(_level(access_level))
