"""Configuration management for mysql_utilities.

Usage:
    >>> from mysql_utilities.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.slow_threshold_ms)
"""

from mysql_utilities.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
