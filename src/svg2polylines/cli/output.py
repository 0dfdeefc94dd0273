"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from svg2polylines.domain import Polyline

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for path element processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]svg2polylines[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(svg_path: str, path_count: int, tolerance: float) -> None:
    """Print document information.

    Args:
        svg_path: Path to the SVG file
        path_count: Number of elements carrying path data
        tolerance: Flattening tolerance in document units
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {path_count:,} path elements {SYM_DOT} tolerance {tolerance:g}")


def _format_point(x: float, y: float) -> str:
    return f"({x:g}, {y:g})"


def print_polylines(polylines: Sequence[Polyline]) -> None:
    """Print the polyline summary followed by one line per polyline.

    Args:
        polylines: Converted polylines
    """
    point_count = sum(len(p) for p in polylines)
    console.print(f"polylines: {len(polylines)}, points: {point_count}", highlight=False)
    for polyline in polylines:
        coords = ", ".join(_format_point(p.x, p.y) for p in polyline)
        console.print(f"- [{coords}]", highlight=False, markup=False, soft_wrap=True)


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


def print_summary(
    total_time_s: float,
    processed: int,
    polylines: int,
    points: int,
    errors: int,
    output_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        processed: Number of path elements converted
        polylines: Number of polylines produced
        points: Number of points produced
        errors: Number of path elements discarded
        output_path: Path of the written JSON file, if any
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {processed} paths {SYM_DOT} {polylines} polylines {SYM_DOT} {points} points "
        f"{SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_discarded(errors: Sequence[tuple[str, str]]) -> None:
    """Print the elements discarded because of malformed path data.

    Args:
        errors: (element id, message) pairs
    """
    for element_id, message in errors:
        line = Text(f"  {SYM_ERR} ", style="yellow")
        line.append(element_id, style="bold")
        line.append(f": {message}")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output written")
