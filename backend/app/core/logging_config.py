"""
Logging configuration for the portal API.
"""
import logging
import sys

from backend.app.core.config import settings


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure application logging. Returns the portal root logger."""
    level_val = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level_val.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # SQL statements only when DATABASE_ECHO is set
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return logging.getLogger("backend")


def get_logger(name: str) -> logging.Logger:
    """Logger under the portal namespace, e.g. get_logger("api.jobs") -> backend.api.jobs"""
    return logging.getLogger(f"backend.{name}")
