"""Rich console output helpers for the CLI."""

from collections import Counter

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svgdevice[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_script_info(script_path: str, calls: int, width_pt: int, height_pt: int) -> None:
    """Print draw script information.

    Args:
        script_path: Path to the draw script
        calls: Number of draw calls in the script
        width_pt: Page width in points
        height_pt: Page height in points
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(script_path)
    console.print(line)
    console.print(f"  {calls:,} calls {SYM_DOT} {width_pt}×{height_pt} pt")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    elements: Counter[str],
    failures: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Time the canvas was open, in seconds
        elements: Elements written per primitive kind
        failures: Number of elements that could not be written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    failure_style = "red" if failures > 0 else "green"
    console.print(
        f"  {sum(elements.values())} elements {SYM_DOT} "
        f"[{failure_style}]{failures} failed[/{failure_style}]"
    )
    if elements:
        console.print(
            "  " + f" {SYM_DOT} ".join(f"{n} {kind}" for kind, n in sorted(elements.items()))
        )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
