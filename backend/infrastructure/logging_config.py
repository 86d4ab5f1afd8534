"""Logging setup shared by every entry point."""

import logging
from typing import Optional

from infrastructure.config import get_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once.

    Args:
        level: Level name; falls back to LOG_LEVEL (default INFO).
            Unknown names fall back to INFO.
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)
