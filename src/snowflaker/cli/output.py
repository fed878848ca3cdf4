"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted summaries and messages.
"""

from rich.console import Console
from rich.table import Table

from snowflaker.utils import GenerationStats

console = Console()
err_console = Console(stderr=True)

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
    console.print(f"\n[bold]Snowflaker[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_generation_info(iterations: int, parallel: bool, workers: int, is_auto: bool) -> None:
    """Print generation configuration.

    Args:
        iterations: Number of subdivision passes
        parallel: Whether the parallel strategy is used
        workers: Number of worker threads
        is_auto: Whether the worker count was auto-detected
    """
    if parallel:
        auto_suffix = " (auto)" if is_auto else ""
        strategy = f"parallel {SYM_DOT} {workers} workers{auto_suffix}"
    else:
        strategy = "sequential"
    console.print(f"  {iterations} iterations {SYM_DOT} {strategy}")


def _format_time(milliseconds: float) -> str:
    """Format milliseconds into human-readable time string."""
    if milliseconds < 1000:
        return f"{milliseconds:.2f}ms"
    seconds = milliseconds / 1000
    if seconds < 60:
        return f"{seconds:.1f}s"
    mins = int(seconds // 60)
    secs = seconds % 60
    return f"{mins}m {secs:.1f}s"


def print_success(stats: GenerationStats, segment_count: int) -> None:
    """Print success message with summary.

    Args:
        stats: Statistics of the finished run
        segment_count: Number of edges of the resulting curve
    """
    console.print(
        f"\n[bold green]{SYM_OK} Generated[/bold green] in {_format_time(stats.duration_ms)}"
    )
    console.print(
        f"  {stats.point_count:,} points {SYM_DOT} {segment_count:,} segments "
        f"{SYM_DOT} {stats.strategy}"
    )
    slowest = stats.slowest_iteration_ms
    if slowest is not None:
        console.print(f"  slowest iteration {_format_time(slowest)}")


def print_comparison(
    sequential: GenerationStats,
    parallel: GenerationStats,
    equivalent: bool,
    tolerance: float,
) -> None:
    """Print a side-by-side timing of both strategies.

    Args:
        sequential: Statistics of the sequential run
        parallel: Statistics of the parallel run
        equivalent: Whether both runs produced the same points
        tolerance: Coordinate tolerance used for the comparison
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("  Strategy")
    table.add_column("Workers", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Time", justify="right")
    for stats in (sequential, parallel):
        table.add_row(
            f"  {stats.strategy}",
            str(stats.workers),
            f"{stats.point_count:,}",
            _format_time(stats.duration_ms),
        )
    console.print()
    console.print(table)

    if parallel.duration_ms > 0:
        speedup = sequential.duration_ms / parallel.duration_ms
        console.print(f"\n  speedup {speedup:.2f}x")

    if equivalent:
        console.print(f"\n[bold green]{SYM_OK} Outputs match[/bold green] (tolerance {tolerance:g})")
    else:
        console.print(f"\n[bold red]{SYM_ERR} Outputs differ[/bold red] (tolerance {tolerance:g})")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")
