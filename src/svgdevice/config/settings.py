"""Configuration settings for svgdevice."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class WriteErrorPolicy(str, Enum):
    """What a draw call does when its element cannot be written."""

    RAISE = "raise"
    LOG = "log"


class OutputConfig(BaseModel):
    """Configuration for SVG emission.

    The defaults reproduce the conventions of the graphics host: 72 points per
    inch for the page size and line widths expressed in 1/96 inch.
    """

    precision: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Fixed number of decimals for coordinates and lengths",
    )
    points_per_inch: int = Field(
        default=72,
        ge=1,
        description="Device points per inch used for the page size",
    )
    stroke_width_divisor: float = Field(
        default=96.0,
        gt=0.0,
        description="Divisor converting host line width to SVG stroke-width",
    )
    escape_text: bool = Field(
        default=True,
        description="Escape XML special characters in text content",
    )
    on_write_error: WriteErrorPolicy = Field(
        default=WriteErrorPolicy.RAISE,
        description="Raise DeviceWriteError per failed element, or log and continue",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding of the output file",
    )

    def page_size(self, width_in: float, height_in: float) -> tuple[int, int]:
        """Convert a page size in inches to integer device points.

        Args:
            width_in: Page width in inches
            height_in: Page height in inches

        Returns:
            Tuple of (width_pt, height_pt)
        """
        return (
            round(width_in * self.points_per_inch),
            round(height_in * self.points_per_inch),
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class DeviceSettings(BaseModel):
    """Main device settings."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DeviceSettings:
    """Get default device settings."""
    return DeviceSettings()
