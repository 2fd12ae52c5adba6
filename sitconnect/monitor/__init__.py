"""Logging setup for SitConnect."""

from sitconnect.monitor.logger import get_activity_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_activity_logger",
]
