"""
Logging setup for command-line entry points.

Library modules only create loggers; handlers are installed here, once, by
the script that owns the process.
"""

from __future__ import annotations

from typing import Optional
import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None, filename: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name; defaults to HANOI_LOG_LEVEL or WARNING
        filename: Optional log file (stderr otherwise)
    """
    if level is None:
        level = os.environ.get("HANOI_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, filename=filename)
