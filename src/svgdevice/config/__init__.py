"""Configuration management for svgdevice.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, by the host, or defaults.

Key classes:
- OutputConfig: Number formatting, unit conversion and write-failure policy
- LoggingConfig: Logging settings
- DeviceSettings: Main device settings
"""

from svgdevice.config.settings import (
    DeviceSettings,
    LoggingConfig,
    OutputConfig,
    WriteErrorPolicy,
    get_default_settings,
)

__all__ = [
    "DeviceSettings",
    "LoggingConfig",
    "OutputConfig",
    "WriteErrorPolicy",
    "get_default_settings",
]
