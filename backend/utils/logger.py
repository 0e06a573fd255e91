"""Process-wide logging setup shared by the booking backend."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from backend.utils.config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured_level: Optional[str] = None


def configure_logging(level: Optional[str] = None) -> str:
    """Install the stdout handler on first use and return the active level.

    Later calls are no-ops so module-level `get_logger` calls in any import
    order end up on the same handler.
    """
    global _configured_level
    if _configured_level is not None:
        return _configured_level

    resolved_level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, stream=sys.stdout)
    _configured_level = resolved_level
    return resolved_level


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
