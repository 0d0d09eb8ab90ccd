"""
jsonleaf - Logging setup.

The library only creates module loggers; applications call ``configure_logging``
when they want jsonleaf's settings applied to the root handler.
"""

import logging
import sys

from jsonleaf.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure standard logging from settings (or an explicit level)."""
    settings = get_settings()
    logging.basicConfig(
        level=level or settings.log_level,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("jsonleaf").setLevel(level or settings.log_level)
