"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import math

from rich.console import Console
from rich.table import Table
from rich.text import Text

from loopcorner.core.analyzer import CornerReport
from loopcorner.utils.logging import CornerStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_LABEL_STYLES = {
    "quite sharp": "bold red",
    "sharp": "red",
    "quite dull": "bold blue",
    "dull": "blue",
    "straight": "dim",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Loopcorner[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source: str, kind: str, loop_count: int, tolerance_deg: float) -> None:
    """Print information about the loaded loops.

    Args:
        source: Path to the input file (and glyph, if any)
        kind: Input kind (e.g. "TrueType", "JSON")
        loop_count: Number of loops read
        tolerance_deg: Angular tolerance in degrees
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    line.append(f" ({kind})")
    console.print(line)
    console.print(f"  {loop_count} loops {SYM_DOT} tolerance {tolerance_deg:g}°")


def build_corner_table(loop_idx: int, reports: list[CornerReport]) -> Table:
    """Build a table of the corners of one loop.

    Args:
        loop_idx: Index of the loop
        reports: Corner reports of the loop, in curve order

    Returns:
        Rich table with one row per corner
    """
    table = Table(title=f"Loop {loop_idx}", title_justify="left")
    table.add_column("Curve", justify="right")
    table.add_column("Turn", justify="right")
    table.add_column("Cross", justify="right")
    table.add_column("Corner")

    for report in reports:
        label = report.label
        table.add_row(
            str(report.curve_idx),
            f"{math.degrees(report.corner.turn_angle):+.2f}°",
            f"{report.corner.cross_tangents:+.4f}",
            Text(label, style=_LABEL_STYLES[label]),
        )
    return table


def print_corners(loop_idx: int, reports: list[CornerReport]) -> None:
    """Print the corner table of one loop."""
    console.print()
    console.print(build_corner_table(loop_idx, reports))


def print_summary(stats: CornerStats) -> None:
    """Print classification statistics.

    Args:
        stats: Statistics collected while classifying
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    console.print(
        f"  {stats.corner_count} corners {SYM_DOT} {stats.sharp_count} sharp "
        f"({stats.quite_sharp_count} quite) {SYM_DOT} {stats.dull_count} dull "
        f"({stats.quite_dull_count} quite) {SYM_DOT} {stats.degenerate_count} straight"
    )
    if stats.error_count:
        console.print(f"  [red]{stats.error_count} loops skipped[/red]")
        for loop_idx, error in stats.errors:
            console.print(f"    loop {loop_idx}: {error}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
