"""Adaptive background grid planning.

The grid step starts at the configured spacing and doubles until the visible
span needs no more than MAX_GRID_LINES lines per axis. Zooming out therefore
coarsens the grid instead of drawing an unbounded number of lines, while
zooming in keeps the configured detail.
"""

import math
from dataclasses import dataclass, field

from dxfview.core.transform import ViewTransform, visible_world_bounds
from dxfview.domain import Bounds

MAX_GRID_LINES = 5000
MIN_GRID_STEP = 1e-6
MIN_VISIBLE_SPAN = 1e-6

MINOR_ALPHA = 0.16
AXIS_ALPHA = 0.34


def normalize_grid_step(base_step: float, span: float, max_lines: int = MAX_GRID_LINES) -> float:
    """Double the base step until the span needs at most max_lines lines.

    Args:
        base_step: Configured spacing in document units
        span: Visible extent along one axis
        max_lines: Line budget for that axis

    Returns:
        Grid step in document units
    """
    step = max(base_step, MIN_GRID_STEP)
    while span / step > max_lines:
        step *= 2
    return step


def grid_positions(
    minimum: float, maximum: float, step: float, max_lines: int = MAX_GRID_LINES
) -> list[float]:
    """World positions of grid lines covering [minimum, maximum].

    Lines sit on integer multiples of step, from floor(min/step) to
    ceil(max/step), capped at max_lines.
    """
    start = math.floor(minimum / step)
    end = min(math.ceil(maximum / step), start + max_lines - 1)
    return [index * step for index in range(start, end + 1)]


@dataclass
class GridPlan:
    """Grid lines to draw for one frame.

    Attributes:
        visible: Document-space rectangle covered by the canvas
        step_x: Spacing of vertical lines
        step_y: Spacing of horizontal lines
        xs: X positions of vertical minor lines
        ys: Y positions of horizontal minor lines
        show_y_axis: Whether the X=0 line is visible
        show_x_axis: Whether the Y=0 line is visible
    """

    visible: Bounds
    step_x: float
    step_y: float
    xs: list[float] = field(default_factory=list)
    ys: list[float] = field(default_factory=list)
    show_y_axis: bool = False
    show_x_axis: bool = False


def plan_grid(
    transform: ViewTransform, base_step: float, max_lines: int = MAX_GRID_LINES
) -> GridPlan:
    """Choose grid steps and line positions for the current view.

    Each axis is planned independently.

    Args:
        transform: Current view transform
        base_step: Configured spacing in document units
        max_lines: Line budget per axis

    Returns:
        GridPlan for the visible rectangle
    """
    visible = visible_world_bounds(transform)
    span_x = max(visible.width, MIN_VISIBLE_SPAN)
    span_y = max(visible.height, MIN_VISIBLE_SPAN)
    step_x = normalize_grid_step(base_step, span_x, max_lines)
    step_y = normalize_grid_step(base_step, span_y, max_lines)

    return GridPlan(
        visible=visible,
        step_x=step_x,
        step_y=step_y,
        xs=grid_positions(visible.min_x, visible.max_x, step_x, max_lines),
        ys=grid_positions(visible.min_y, visible.max_y, step_y, max_lines),
        show_y_axis=visible.contains_x(0.0),
        show_x_axis=visible.contains_y(0.0),
    )
