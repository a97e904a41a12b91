"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for batch triangulation.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Hullmesh[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_input_info(path: str, point_count: int, polygon_count: int) -> None:
    """Print input file information.

    Args:
        path: Path to the input file
        point_count: Number of points in the point cloud
        polygon_count: Number of polygons
    """
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {point_count:,} points {SYM_DOT} {polygon_count:,} polygons")


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


def print_result(output_path: str, summary: str, elapsed_s: float) -> None:
    """Print success message for a single-shot computation.

    Args:
        output_path: Path to output file
        summary: One-line description of the result
        elapsed_s: Computation time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(elapsed_s)}")
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    console.print(f"  {summary}")


def print_batch_summary(
    output_path: str,
    total_time_s: float,
    processed: int,
    triangles: int,
    degenerate: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with batch summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        processed: Number of polygons triangulated
        triangles: Total triangles emitted
        degenerate: Polygons that needed the no-ear fallback
        errors: Number of errors encountered
        avg_time_ms: Average processing time per polygon in milliseconds
        min_time_ms: Fastest polygon in milliseconds
        max_time_ms: Slowest polygon in milliseconds
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    degenerate_style = "yellow" if degenerate > 0 else "green"
    console.print(
        f"  {processed} polygons {SYM_DOT} {triangles} triangles {SYM_DOT} "
        f"[{degenerate_style}]{degenerate} degenerate[/{degenerate_style}] {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.1f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.1f}-{max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary(processed: int, cancelled: int) -> None:
    """Print cancellation summary.

    Args:
        processed: Number of polygons finished before cancellation
        cancelled: Number of pending tasks that were cancelled
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {processed} polygons completed {SYM_DOT} {cancelled} tasks cancelled")
    console.print("  No output file created")
