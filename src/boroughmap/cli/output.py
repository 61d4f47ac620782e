"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from boroughmap.domain import ClassificationResult, Confidence, RegionStats, RegionStore
from boroughmap.utils import BuildStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_CONFIDENCE_STYLES = {
    Confidence.HIGH: "green",
    Confidence.MEDIUM: "yellow",
    Confidence.LOW: "dark_orange",
    Confidence.NONE: "red",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Boroughmap[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_region_built(name: str, full_points: int, simplified_points: int) -> None:
    console.print(
        f"  [green]{SYM_OK}[/green] {name}: {full_points:,} boundary points "
        f"{SYM_DOT} simplified to {simplified_points:,}"
    )


def print_region_failed(name: str, reason: str) -> None:
    console.print(f"  [red]{SYM_ERR}[/red] {name}: {reason}")


def print_store_summary(store: RegionStore) -> None:
    """Print a table of regions in a store."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Borough")
    table.add_column("Full", justify="right")
    table.add_column("Simplified", justify="right")

    for boundary in store.boundaries:
        table.add_row(
            Text(boundary.region.display_name, style=boundary.region.color),
            f"{len(boundary.full):,}",
            f"{len(boundary.simplified):,}",
        )
    console.print(table)


def print_build_summary(output_path: str, stats: BuildStats) -> None:
    """Print build completion message.

    Args:
        output_path: Path of the saved store
        stats: Build statistics
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if stats.failed_count > 0 else "green"
    console.print(
        f"  {stats.built_count} regions {SYM_DOT} "
        f"[{error_style}]{stats.failed_count} failed[/{error_style}] {SYM_DOT} "
        f"{stats.dropped_segments} ways dropped"
    )


def print_classification(result: ClassificationResult) -> None:
    """Print a single classification result."""
    style = _CONFIDENCE_STYLES[result.confidence]
    distance = "n/a" if result.distance == float("inf") else f"{result.distance:.6f}°"
    console.print(
        f"  {result.region.display_name} {SYM_DOT} "
        f"[{style}]{result.confidence.value}[/{style}] confidence {SYM_DOT} "
        f"distance {distance}"
    )


def print_region_stats(stats: list[RegionStats], total: int) -> None:
    """Print per-region distribution of a batch."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Borough")
    table.add_column("Points", justify="right")
    table.add_column("High", justify="right")
    table.add_column("Med", justify="right")
    table.add_column("Low", justify="right")

    for entry in stats:
        table.add_row(
            Text(entry.region.display_name, style=entry.region.color),
            f"{entry.count:,}",
            f"{entry.high_confidence:,}",
            f"{entry.medium_confidence:,}",
            f"{entry.low_confidence:,}",
        )

    console.print(f"  {total:,} points")
    console.print(table)


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


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
