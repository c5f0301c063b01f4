"""CLI application entry point for dxfview.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from dxfview import __version__
from dxfview.cli.output import (
    console,
    format_measurement,
    print_document_info,
    print_error,
    print_header,
    print_snap_result,
    print_step,
    print_success,
    print_warnings,
)
from dxfview.config import (
    CanvasConfig,
    DisplayConfig,
    LoggingConfig,
    MeasureConfig,
    ViewerSettings,
)
from dxfview.core import DrawingViewer, compute_bounds
from dxfview.domain import Measurement, Point, Viewport
from dxfview.exceptions import DocumentReadError, DxfViewError, ImageSaveError

# Create the Typer app
app = typer.Typer(
    name="dxfview",
    help="Inspect, rasterize and measure ASCII DXF drawings.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]dxfview[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_point(value: str) -> Point:
    """Parse an "X,Y" pair of document coordinates.

    Raises:
        typer.BadParameter: If the value is not two comma separated numbers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"Expected X,Y but got {value!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise typer.BadParameter(f"Expected X,Y but got {value!r}") from e


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
    """Inspect, rasterize and measure ASCII DXF drawings."""


@app.command()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to a DXF file", show_default=False),
    ],
) -> None:
    """Show entity counts, extents and warnings for a drawing.

    Example:
        dxfview info bracket.dxf
    """
    try:
        viewer = DrawingViewer(ViewerSettings())
        document = viewer.load(input_file)
    except DxfViewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_document_info(str(input_file), document, compute_bounds(document.entities))
    print_warnings(document.warnings)


@app.command("render")
def render_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to a DXF file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output PNG path (default: {name}.png next to the drawing)",
        ),
    ] = None,
    width: Annotated[
        int,
        typer.Option("--width", help="Canvas width in pixels", min=10, max=16384),
    ] = 800,
    height: Annotated[
        int,
        typer.Option("--height", help="Canvas height in pixels", min=10, max=16384),
    ] = 600,
    ratio: Annotated[
        float,
        typer.Option("--ratio", help="Device pixels per canvas pixel", min=0.25, max=8.0),
    ] = 1.0,
    zoom: Annotated[
        float,
        typer.Option("--zoom", help="Zoom factor about the canvas center"),
    ] = 1.0,
    pan_x: Annotated[
        float,
        typer.Option("--pan-x", help="Horizontal pan in pixels"),
    ] = 0.0,
    pan_y: Annotated[
        float,
        typer.Option("--pan-y", help="Vertical pan in pixels"),
    ] = 0.0,
    padding: Annotated[
        float,
        typer.Option("--padding", help="Padding around the drawing in pixels", min=0.0, max=200.0),
    ] = 24.0,
    line_color: Annotated[
        str,
        typer.Option("--line-color", help="Entity stroke color (#rgb or #rrggbb)"),
    ] = "#4c9aff",
    background_color: Annotated[
        str,
        typer.Option("--background-color", help="Background color (#rgb or #rrggbb)"),
    ] = "#10131a",
    grid: Annotated[
        bool,
        typer.Option("--grid/--no-grid", help="Draw the adaptive background grid"),
    ] = True,
    grid_step: Annotated[
        float,
        typer.Option("--grid-step", help="Base grid spacing in drawing units"),
    ] = 1.0,
    measure_from: Annotated[
        str | None,
        typer.Option("--measure-from", help="Measurement start as X,Y in drawing units"),
    ] = None,
    measure_to: Annotated[
        str | None,
        typer.Option("--measure-to", help="Measurement end as X,Y in drawing units"),
    ] = None,
    inches: Annotated[
        bool,
        typer.Option("--inches", help="Report the measured distance in inches"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Render a drawing to a PNG image.

    Example:
        dxfview render bracket.dxf --width 1200 --height 900 --no-grid

    This will create bracket.png next to the drawing.
    """
    start_time = time.time()

    measurement = None
    if measure_from is not None:
        measurement = Measurement(
            start=parse_point(measure_from),
            end=parse_point(measure_to) if measure_to is not None else None,
        )
    elif measure_to is not None:
        raise typer.BadParameter("--measure-to requires --measure-from")

    try:
        settings = ViewerSettings(
            display=DisplayConfig(
                line_color=line_color,
                background_color=background_color,
                padding=padding,
                show_gridlines=grid,
                grid_step=grid_step,
            ),
            canvas=CanvasConfig(width=width, height=height, pixel_ratio=ratio),
            measure=MeasureConfig(use_inches=inches),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid display settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading drawing")

    try:
        viewer = DrawingViewer(settings, quiet=quiet)
        document = viewer.load(input_file)

        if not quiet:
            print_document_info(str(input_file), document, compute_bounds(document.entities))
            print_warnings(document.warnings)
            print_step("Rendering")

        saved = viewer.export_png(
            input_file,
            output=output,
            viewport=Viewport(zoom=zoom, pan_x=pan_x, pan_y=pan_y),
            measurement=measurement,
            document=document,
        )
    except DocumentReadError as e:
        print_error(f"Could not read drawing: {e.reason}")
        raise typer.Exit(code=1)
    except ImageSaveError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except DxfViewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        distance = measurement.distance() if measurement is not None else None
        print_success(
            output_path=str(saved),
            total_time_s=time.time() - start_time,
            width=round(width * ratio),
            height=round(height * ratio),
            distance=format_measurement(distance, inches) if distance is not None else None,
        )


@app.command()
def snap(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to a DXF file", show_default=False),
    ],
    x: Annotated[float, typer.Argument(help="Canvas X in pixels")],
    y: Annotated[float, typer.Argument(help="Canvas Y in pixels")],
    radius: Annotated[
        float,
        typer.Option("--radius", "-r", help="Snap radius in pixels", min=0.0, max=200.0),
    ] = 14.0,
    width: Annotated[
        int,
        typer.Option("--width", help="Canvas width in pixels", min=10, max=16384),
    ] = 800,
    height: Annotated[
        int,
        typer.Option("--height", help="Canvas height in pixels", min=10, max=16384),
    ] = 600,
    zoom: Annotated[
        float,
        typer.Option("--zoom", help="Zoom factor about the canvas center"),
    ] = 1.0,
    pan_x: Annotated[
        float,
        typer.Option("--pan-x", help="Horizontal pan in pixels"),
    ] = 0.0,
    pan_y: Annotated[
        float,
        typer.Option("--pan-y", help="Vertical pan in pixels"),
    ] = 0.0,
) -> None:
    """Snap a canvas position to the nearest drawing vertex.

    Example:
        dxfview snap bracket.dxf 400 300 --radius 20
    """
    settings = ViewerSettings(
        canvas=CanvasConfig(width=width, height=height),
        measure=MeasureConfig(snap_radius=radius),
    )

    try:
        viewer = DrawingViewer(settings)
        document = viewer.load(input_file)
    except DxfViewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    vertex = viewer.snap(document, x, y, Viewport(zoom=zoom, pan_x=pan_x, pan_y=pan_y))
    print_snap_result(x, y, vertex)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
