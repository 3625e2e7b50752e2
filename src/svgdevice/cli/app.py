"""CLI application entry point for svgdevice.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from svgdevice import __version__
from svgdevice.cli.output import (
    print_error,
    print_header,
    print_script_info,
    print_step,
    print_success,
)
from svgdevice.config import DeviceSettings, LoggingConfig, OutputConfig, WriteErrorPolicy
from svgdevice.device import svg_device
from svgdevice.exceptions import (
    DeviceCloseError,
    DeviceSetupError,
    ScriptError,
    SvgDeviceError,
)
from svgdevice.io import load_script
from svgdevice.utils import configure_logging

app = typer.Typer(
    name="svgdevice",
    help="Render recorded drawing calls to an SVG document.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"svgdevice v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render recorded drawing calls to an SVG document."""


@app.command()
def render(
    script: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON draw script",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: script path with .svg suffix)",
        ),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            help="Page width in inches (overrides the script)",
            min=0.01,
        ),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option(
            "--height",
            help="Page height in inches (overrides the script)",
            min=0.01,
        ),
    ] = None,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimals for coordinates and lengths",
            min=0,
            max=10,
        ),
    ] = 3,
    on_write_error: Annotated[
        str,
        typer.Option(
            "--on-write-error",
            help="What to do when an element cannot be written (raise|log)",
        ),
    ] = "raise",
    no_escape: Annotated[
        bool,
        typer.Option(
            "--no-escape",
            help="Write text content verbatim, without XML escaping",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Replay a JSON draw script onto a new SVG document.

    Example:
        svgdevice render plot.json -o plot.svg --width 7 --height 5
    """
    try:
        policy = WriteErrorPolicy(on_write_error.lower())
    except ValueError:
        print_error(
            f"Invalid write-error policy: {on_write_error}",
            details="Valid values: raise, log",
        )
        raise typer.Exit(code=1)

    settings = DeviceSettings(
        output=OutputConfig(
            precision=precision,
            escape_text=not no_escape,
            on_write_error=policy,
        ),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    actual_output = output if output is not None else script.with_suffix(".svg")

    try:
        if not quiet:
            print_step("Loading script")
        draw_script = load_script(script)

        page_width = width if width is not None else draw_script.width
        page_height = height if height is not None else draw_script.height
        width_pt, height_pt = settings.output.page_size(page_width, page_height)

        if not quiet:
            print_script_info(str(script), len(draw_script.calls), width_pt, height_pt)
            print_step("Rendering")

        device = svg_device(actual_output, page_width, page_height, settings)
        try:
            draw_script.replay(device)
        finally:
            device.close()

        if not quiet:
            print_success(
                output_path=str(actual_output),
                file_size=_format_file_size(actual_output),
                total_time_s=device.stats.duration_seconds,
                elements=device.stats.elements,
                failures=device.stats.failure_count,
            )

    except ScriptError as e:
        print_error(f"Could not load script: {e.reason}")
        raise typer.Exit(code=1)
    except DeviceSetupError as e:
        print_error(f"Could not create output: {e.reason}")
        raise typer.Exit(code=1)
    except DeviceCloseError as e:
        print_error(f"Output may be incomplete: {e.reason}")
        raise typer.Exit(code=1)
    except SvgDeviceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form."""
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
