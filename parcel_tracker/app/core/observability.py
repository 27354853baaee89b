"""
Logging setup for the Parcel Tracker.

Operations log through the shared "parcel_tracker" logger with structured
context passed via `extra`.
"""

import logging
from typing import Optional

from parcel_tracker.app.core.config import settings

logger = logging.getLogger("parcel_tracker")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a basic stream handler on the parcel_tracker logger.
    
    Args:
        level: Log level name; falls back to settings.log_level
    """
    level_name = (level or settings.log_level).upper()
    
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
