"""Interactive view state passed to the renderer on every draw.

- Viewport: zoom and pan layered on top of the content-fit transform
- Measurement: start/end/hover points of the measuring overlay
- RenderOptions: everything a single draw call needs besides the document

These values are owned by the interaction layer; the renderer only reads them.
"""

import math
from dataclasses import dataclass, field, replace

from dxfview.domain.geometry import Point

ZOOM_MIN = 0.02
ZOOM_MAX = 200.0


def clamp_zoom(zoom: float) -> float:
    """Clamp a zoom factor to [ZOOM_MIN, ZOOM_MAX]; non-finite becomes 1."""
    if not math.isfinite(zoom):
        return 1.0
    return min(ZOOM_MAX, max(ZOOM_MIN, zoom))


@dataclass(frozen=True, slots=True)
class Viewport:
    """Interactive zoom/pan in screen pixels.

    Zoom is applied around the canvas center, then pan is added.

    Attributes:
        zoom: Scale factor on top of the fit scale
        pan_x: Horizontal screen offset in pixels
        pan_y: Vertical screen offset in pixels
    """

    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0

    def panned_by(self, dx: float, dy: float) -> "Viewport":
        """Return a viewport moved by a screen-space delta."""
        return replace(self, pan_x=self.pan_x + dx, pan_y=self.pan_y + dy)

    def zoomed_at(
        self,
        cursor_x: float,
        cursor_y: float,
        factor: float,
        canvas_width: float,
        canvas_height: float,
    ) -> "Viewport":
        """Zoom by a factor while keeping the point under the cursor fixed.

        Args:
            cursor_x: Cursor X in canvas pixels
            cursor_y: Cursor Y in canvas pixels
            factor: Multiplier applied to the current zoom
            canvas_width: Canvas width in pixels
            canvas_height: Canvas height in pixels

        Returns:
            New viewport; self when the clamped zoom does not change
        """
        current = clamp_zoom(self.zoom)
        target = clamp_zoom(current * factor)
        if abs(target - current) < 1e-6:
            return self

        center_x = canvas_width / 2
        center_y = canvas_height / 2
        pan_x = cursor_x - center_x - ((cursor_x - center_x - self.pan_x) / current) * target
        pan_y = cursor_y - center_y - ((cursor_y - center_y - self.pan_y) / current) * target
        return Viewport(zoom=target, pan_x=pan_x, pan_y=pan_y)


@dataclass(frozen=True, slots=True)
class Measurement:
    """Measuring overlay state in document coordinates.

    Attributes:
        start: First picked vertex
        end: Second picked vertex
        hover: Vertex currently under the cursor
    """

    start: Point | None = None
    end: Point | None = None
    hover: Point | None = None

    def select(self, point: Point) -> "Measurement":
        """Apply a click on a snapped vertex.

        The first click sets the start, the second sets the end, and a click
        after a completed measurement starts a new one.
        """
        if self.start is None or self.end is not None:
            return Measurement(start=point, end=None, hover=point)
        return Measurement(start=self.start, end=point, hover=point)

    def with_hover(self, point: Point | None) -> "Measurement":
        return replace(self, hover=point)

    def has_endpoints(self) -> bool:
        """Check if at least one of start/end is set."""
        return self.start is not None or self.end is not None

    def distance(self) -> float | None:
        """Distance between start and end in document units, if both exist."""
        if self.start is None or self.end is None:
            return None
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class RenderOptions:
    """Options for one draw call.

    Attributes:
        line_color: Stroke color as #rgb or #rrggbb
        background_color: Fill color as #rgb or #rrggbb
        padding: Margin around the fitted drawing in pixels
        show_gridlines: Draw the adaptive background grid
        grid_step: Base grid spacing in document units
        viewport: Current zoom/pan
        measurement: Optional measuring overlay
    """

    line_color: str = "#4c9aff"
    background_color: str = "#10131a"
    padding: float = 24.0
    show_gridlines: bool = True
    grid_step: float = 1.0
    viewport: Viewport = field(default_factory=Viewport)
    measurement: Measurement | None = None
