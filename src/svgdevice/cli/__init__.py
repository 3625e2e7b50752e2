"""Command-line interface for svgdevice.

This module provides a small replay host using Typer with rich output:
it loads a JSON draw script and renders it to an SVG file.
"""

from svgdevice.cli.app import cli, main

__all__ = ["cli", "main"]
