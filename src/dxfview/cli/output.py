"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dxfview.domain import Bounds, Document, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info

INCH_IN_MM = 25.4


def format_distance(value: float) -> str:
    """Format a distance with precision that shrinks as the value grows.

    Example:
        >>> format_distance(123.456)
        '123.5'
        >>> format_distance(12.3456)
        '12.35'
        >>> format_distance(1.23456)
        '1.235'
    """
    if value >= 100:
        return f"{value:.1f}"
    if value >= 10:
        return f"{value:.2f}"
    return f"{value:.3f}"


def format_measurement(distance_mm: float, use_inches: bool = False) -> str:
    """Format a document distance (treated as mm) with its unit."""
    if use_inches:
        return f"{format_distance(distance_mm / INCH_IN_MM)} in"
    return f"{format_distance(distance_mm)} mm"


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def _format_point(point: Point) -> str:
    return f"({point.x:g}, {point.y:g})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]dxfview[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, document: Document, bounds: Bounds | None) -> None:
    """Print entity counts and extents of a loaded drawing.

    Args:
        path: Path to the drawing file
        document: Parsed drawing
        bounds: Bounds of all entities, or None when there are none
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    line.append(f" ({len(document.entities):,} entities)")
    console.print(line)

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Kind")
    table.add_column("Count", justify="right")
    for kind, count in document.count_by_kind().items():
        table.add_row(kind.value, f"{count:,}")
    console.print(table)

    if bounds is None:
        console.print("  No drawable extents")
    else:
        console.print(
            f"  Extents {_format_point(Point(bounds.min_x, bounds.min_y))} "
            f"{SYM_DOT} {_format_point(Point(bounds.max_x, bounds.max_y))} "
            f"{SYM_DOT} {bounds.width:g} x {bounds.height:g}"
        )


def print_warnings(warnings: tuple[str, ...] | list[str]) -> None:
    """Print non-fatal parse warnings.

    Args:
        warnings: Warning messages attached to a document
    """
    for warning in warnings:
        console.print(f"  [yellow]{SYM_WARN} {warning}[/yellow]")


def print_success(
    output_path: str,
    total_time_s: float,
    width: int,
    height: int,
    distance: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the written image
        total_time_s: Total time in seconds
        width: Image width in device pixels
        height: Image height in device pixels
        distance: Formatted measured distance, if a measurement was drawn
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({width} x {height} px)")
    console.print(line)

    if distance is not None:
        console.print(f"  Distance: {distance}")


def print_snap_result(screen_x: float, screen_y: float, vertex: Point | None) -> None:
    """Print the outcome of a nearest-vertex query.

    Args:
        screen_x: Query X in canvas pixels
        screen_y: Query Y in canvas pixels
        vertex: Snapped vertex, or None
    """
    query = f"({screen_x:g}, {screen_y:g})"
    if vertex is None:
        console.print(f"  No vertex near {query}")
        return
    console.print(
        f"  [green]{SYM_OK}[/green] {query} snapped to [bold]{_format_point(vertex)}[/bold]"
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
