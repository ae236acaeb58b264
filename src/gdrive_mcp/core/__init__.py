"""
Core utilities package for gdrive-mcp.

This package provides shared configuration.
"""

from .config import (
    DEFAULT_HOST,
    DEFAULT_PATH,
    DEFAULT_PORT,
    HEALTH_PATH,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PATH",
    "DEFAULT_PORT",
    "HEALTH_PATH",
    "Settings",
    "get_settings",
    "reload_settings",
]
