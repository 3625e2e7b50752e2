"""Utility functions for svgdevice.

This module provides utility functions including:

- Logging setup and configuration
- Per-canvas drawing statistics
"""

from svgdevice.utils.logging import (
    DeviceLogger,
    DeviceStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "DeviceLogger",
    "DeviceStats",
    "configure_logging",
    "get_logger",
]
