"""Utility modules for zonekit."""

from zonekit.utils.logging import ContextLogger, component_logger, setup_logger
from zonekit.utils.time import get_timezone, utc_now

__all__ = [
    "setup_logger",
    "ContextLogger",
    "component_logger",
    "get_timezone",
    "utc_now",
]
