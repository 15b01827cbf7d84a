"""
Utility functions for the Tower of Hanoi bot.
"""

from utils.device import (
    get_device,
    get_device_name,
    resolve_device,
)
from utils.logging_config import configure_logging

__all__ = [
    "get_device",
    "get_device_name",
    "resolve_device",
    "configure_logging",
]
