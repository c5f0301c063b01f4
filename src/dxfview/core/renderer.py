"""Stateless drawing of documents onto a surface.

A draw clears the surface, builds a fresh view transform from the surface
size and the current viewport, optionally draws the adaptive grid, strokes
every entity and finally the measurement overlay. Repeated draws with the
same inputs produce the same output.

Key functions:
- render: Draw a document
- find_nearest_vertex: Snap a screen position to the nearest vertex
- create_transform_for_surface: The transform a draw would use
"""

import logging

from dxfview.core.arcs import tessellate_arc
from dxfview.core.bounds import compute_bounds
from dxfview.core.colors import RGBA, with_alpha
from dxfview.core.grid import AXIS_ALPHA, MINOR_ALPHA, plan_grid
from dxfview.core.snapping import nearest_vertex
from dxfview.core.surface import StrokeStyle, Surface
from dxfview.core.transform import ViewTransform, create_transform
from dxfview.domain import (
    Arc,
    Circle,
    Document,
    Entity,
    Line,
    Measurement,
    Point,
    Polyline,
    RenderOptions,
)

logger = logging.getLogger(__name__)

MIN_CANVAS_SIZE = 10

MEASUREMENT_COLOR = "#ffd166"
MEASUREMENT_HOVER_COLOR = "#7bdff2"
MEASUREMENT_LINE_WIDTH = 1.5
MEASUREMENT_DASH = (6.0, 4.0)
HANDLE_RADIUS = 4.0
HOVER_HANDLE_RADIUS = 7.0
HOVER_FILL_ALPHA = 0.2


def canvas_size(surface: Surface) -> tuple[int, int]:
    """Logical canvas size, rounded and floored at MIN_CANVAS_SIZE."""
    return (
        max(MIN_CANVAS_SIZE, round(surface.width)),
        max(MIN_CANVAS_SIZE, round(surface.height)),
    )


def create_transform_for_surface(
    surface: Surface, document: Document, options: RenderOptions
) -> ViewTransform | None:
    """Build the transform a draw on this surface would use.

    Returns:
        ViewTransform, or None when the document has nothing to draw
    """
    bounds = compute_bounds(document.entities)
    if bounds is None:
        return None
    width, height = canvas_size(surface)
    return create_transform(bounds, width, height, options.padding, options.viewport)


def render(surface: Surface, document: Document, options: RenderOptions) -> None:
    """Draw a document onto a surface.

    The surface is always cleared to the background color. With no entities
    nothing else is drawn.

    Args:
        surface: Drawing target
        document: Parsed drawing
        options: Colors, grid, viewport and measurement for this draw
    """
    surface.clear(with_alpha(options.background_color, 1.0))

    transform = create_transform_for_surface(surface, document, options)
    if transform is None:
        logger.debug("Nothing to draw: document has no entities")
        return

    if options.show_gridlines and options.grid_step > 0:
        draw_grid(surface, transform, options.grid_step, options.line_color)

    style = StrokeStyle(color=with_alpha(options.line_color, 1.0), width=1.0)
    for entity in document.entities:
        draw_entity(surface, entity, transform, style)

    measurement = options.measurement
    if measurement is not None and measurement.has_endpoints():
        draw_measurement(surface, transform, measurement)


def draw_entity(
    surface: Surface, entity: Entity, transform: ViewTransform, style: StrokeStyle
) -> None:
    """Stroke a single entity."""
    if isinstance(entity, Line):
        draw_line(surface, entity, transform, style)
    elif isinstance(entity, Polyline):
        draw_polyline(surface, entity, transform, style)
    elif isinstance(entity, Circle):
        draw_circle(surface, entity, transform, style)
    elif isinstance(entity, Arc):
        draw_arc(surface, entity, transform, style)


def draw_line(surface: Surface, entity: Line, transform: ViewTransform, style: StrokeStyle) -> None:
    start = transform.to_screen(entity.start)
    end = transform.to_screen(entity.end)
    surface.begin_path()
    surface.move_to(start.x, start.y)
    surface.line_to(end.x, end.y)
    surface.stroke(style)


def draw_polyline(
    surface: Surface, entity: Polyline, transform: ViewTransform, style: StrokeStyle
) -> None:
    _stroke_points(surface, [transform.to_screen(p) for p in entity.points], style, entity.closed)


def draw_circle(
    surface: Surface, entity: Circle, transform: ViewTransform, style: StrokeStyle
) -> None:
    center = transform.to_screen(entity.center)
    surface.begin_path()
    surface.arc(center.x, center.y, transform.scale_length(entity.radius))
    surface.stroke(style)


def draw_arc(surface: Surface, entity: Arc, transform: ViewTransform, style: StrokeStyle) -> None:
    _stroke_points(surface, [transform.to_screen(p) for p in tessellate_arc(entity)], style)


def _stroke_points(
    surface: Surface, points: list[Point], style: StrokeStyle, closed: bool = False
) -> None:
    if len(points) < 2:
        return
    surface.begin_path()
    surface.move_to(points[0].x, points[0].y)
    for point in points[1:]:
        surface.line_to(point.x, point.y)
    if closed:
        surface.close_path()
    surface.stroke(style)


def draw_grid(
    surface: Surface, transform: ViewTransform, base_step: float, line_color: str
) -> None:
    """Draw minor grid lines and the emphasized X=0 / Y=0 axes.

    Args:
        surface: Drawing target
        transform: Current view transform
        base_step: Configured grid spacing in document units
        line_color: Hex color the grid is tinted from
    """
    plan = plan_grid(transform, base_step)
    visible = plan.visible

    def vertical(x: float, style: StrokeStyle) -> None:
        _stroke_world_segment(
            surface, transform, Point(x, visible.min_y), Point(x, visible.max_y), style
        )

    def horizontal(y: float, style: StrokeStyle) -> None:
        _stroke_world_segment(
            surface, transform, Point(visible.min_x, y), Point(visible.max_x, y), style
        )

    minor = StrokeStyle(color=with_alpha(line_color, MINOR_ALPHA), width=1.0)
    for x in plan.xs:
        vertical(x, minor)
    for y in plan.ys:
        horizontal(y, minor)

    axis = StrokeStyle(color=with_alpha(line_color, AXIS_ALPHA), width=1.0)
    if plan.show_y_axis:
        vertical(0.0, axis)
    if plan.show_x_axis:
        horizontal(0.0, axis)

    logger.debug(
        "Grid drawn: step_x=%s step_y=%s lines=%d",
        plan.step_x,
        plan.step_y,
        len(plan.xs) + len(plan.ys),
    )


def _stroke_world_segment(
    surface: Surface, transform: ViewTransform, start: Point, end: Point, style: StrokeStyle
) -> None:
    _stroke_points(surface, [transform.to_screen(start), transform.to_screen(end)], style)


def draw_measurement(surface: Surface, transform: ViewTransform, measurement: Measurement) -> None:
    """Draw the dashed measuring line, endpoint handles and hover ring."""
    start = transform.to_screen(measurement.start) if measurement.start is not None else None
    end = transform.to_screen(measurement.end) if measurement.end is not None else None
    hover = transform.to_screen(measurement.hover) if measurement.hover is not None else None

    color = with_alpha(MEASUREMENT_COLOR, 1.0)
    if start is not None and end is not None:
        dashed = StrokeStyle(color=color, width=MEASUREMENT_LINE_WIDTH, dash=MEASUREMENT_DASH)
        _stroke_points(surface, [start, end], dashed)

    for handle in (start, end):
        if handle is not None:
            _fill_circle(surface, handle, HANDLE_RADIUS, color)

    if hover is not None:
        surface.begin_path()
        surface.arc(hover.x, hover.y, HOVER_HANDLE_RADIUS)
        surface.fill(with_alpha(MEASUREMENT_HOVER_COLOR, HOVER_FILL_ALPHA))
        surface.stroke(
            StrokeStyle(
                color=with_alpha(MEASUREMENT_HOVER_COLOR, 1.0),
                width=MEASUREMENT_LINE_WIDTH,
            )
        )


def _fill_circle(surface: Surface, center: Point, radius: float, color: RGBA) -> None:
    surface.begin_path()
    surface.arc(center.x, center.y, radius)
    surface.fill(color)


def find_nearest_vertex(
    surface: Surface,
    document: Document,
    options: RenderOptions,
    screen_x: float,
    screen_y: float,
    max_distance: float,
) -> Point | None:
    """Snap a canvas position to the nearest entity vertex.

    Uses the same transform a render with these options would use.

    Args:
        surface: Surface whose size defines the canvas
        document: Parsed drawing
        options: Render options (padding and viewport are used)
        screen_x: Query X in canvas pixels
        screen_y: Query Y in canvas pixels
        max_distance: Search radius in pixels

    Returns:
        Document-space vertex, or None
    """
    transform = create_transform_for_surface(surface, document, options)
    if transform is None:
        return None
    return nearest_vertex(transform, document.entities, screen_x, screen_y, max_distance)
