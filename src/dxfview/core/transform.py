"""Document-to-screen view transform.

The forward mapping is composed of three stages:

1. Fit: scale the drawing bounds into the padded canvas and center it
2. Flip: document Y grows upward, screen Y grows downward
3. Viewport: zoom about the canvas center, then add the pan offset

The inverse applies the algebraic inverse of each stage in reverse order,
so hit-testing and grid planning can map screen pixels back exactly.

A ViewTransform is rebuilt for every draw call and never mutated.
"""

import math
from dataclasses import dataclass

from dxfview.domain import Bounds, Point, Viewport, clamp_zoom

MIN_SPAN = 1e-6
MIN_SCALE = 1e-6


@dataclass(frozen=True, slots=True)
class ViewTransform:
    """Forward and inverse mapping between document and screen coordinates.

    Attributes:
        base_scale: Pixels per document unit from the fit stage
        offset_x: Horizontal centering offset in pixels
        offset_y: Vertical centering offset in pixels (before the flip)
        min_x: Bounds origin X
        min_y: Bounds origin Y
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        zoom: Clamped interactive zoom
        pan_x: Interactive horizontal pan in pixels
        pan_y: Interactive vertical pan in pixels
    """

    base_scale: float
    offset_x: float
    offset_y: float
    min_x: float
    min_y: float
    canvas_width: float
    canvas_height: float
    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0

    @property
    def center_x(self) -> float:
        return self.canvas_width / 2

    @property
    def center_y(self) -> float:
        return self.canvas_height / 2

    @property
    def scale(self) -> float:
        """Effective pixels per document unit including zoom."""
        return self.base_scale * self.zoom

    def world_to_base(self, point: Point) -> Point:
        """Apply the fit and flip stages."""
        return Point(
            (point.x - self.min_x) * self.base_scale + self.offset_x,
            self.canvas_height - ((point.y - self.min_y) * self.base_scale + self.offset_y),
        )

    def apply_viewport(self, base: Point) -> Point:
        """Apply zoom about the canvas center, then pan."""
        return Point(
            self.center_x + (base.x - self.center_x) * self.zoom + self.pan_x,
            self.center_y + (base.y - self.center_y) * self.zoom + self.pan_y,
        )

    def to_screen(self, point: Point) -> Point:
        """Map a document point to screen pixels.

        Args:
            point: Point in document space

        Returns:
            Point in screen space
        """
        return self.apply_viewport(self.world_to_base(point))

    def to_world(self, screen: Point) -> Point:
        """Map screen pixels back to a document point.

        Exact inverse of to_screen up to floating point rounding.

        Args:
            screen: Point in screen space

        Returns:
            Point in document space
        """
        base_x = (screen.x - self.pan_x - self.center_x) / self.zoom + self.center_x
        base_y = (screen.y - self.pan_y - self.center_y) / self.zoom + self.center_y
        return Point(
            (base_x - self.offset_x) / self.base_scale + self.min_x,
            ((self.canvas_height - base_y) - self.offset_y) / self.base_scale + self.min_y,
        )

    def scale_length(self, length: float) -> float:
        """Scale a document length, such as a radius, to pixels.

        Lengths ignore offsets and pan; only fit scale and zoom apply.
        """
        return length * self.base_scale * self.zoom


def create_transform(
    bounds: Bounds,
    width: float,
    height: float,
    padding: float,
    viewport: Viewport | None = None,
) -> ViewTransform:
    """Build the view transform for one draw.

    Args:
        bounds: Drawing bounds in document space
        width: Canvas width in pixels
        height: Canvas height in pixels
        padding: Margin in pixels, clamped to [0, min(width, height) / 2]
        viewport: Interactive zoom/pan (default: identity)

    Returns:
        ViewTransform for this canvas and viewport
    """
    viewport = viewport or Viewport()

    safe_padding = padding if math.isfinite(padding) else 0.0
    safe_padding = min(max(safe_padding, 0.0), min(width, height) / 2)
    span_x = max(bounds.max_x - bounds.min_x, MIN_SPAN)
    span_y = max(bounds.max_y - bounds.min_y, MIN_SPAN)
    scale_x = (width - safe_padding * 2) / span_x
    scale_y = (height - safe_padding * 2) / span_y
    base_scale = max(MIN_SCALE, min(scale_x, scale_y))

    return ViewTransform(
        base_scale=base_scale,
        offset_x=(width - span_x * base_scale) / 2,
        offset_y=(height - span_y * base_scale) / 2,
        min_x=bounds.min_x,
        min_y=bounds.min_y,
        canvas_width=width,
        canvas_height=height,
        zoom=clamp_zoom(viewport.zoom),
        pan_x=viewport.pan_x if math.isfinite(viewport.pan_x) else 0.0,
        pan_y=viewport.pan_y if math.isfinite(viewport.pan_y) else 0.0,
    )


def visible_world_bounds(transform: ViewTransform) -> Bounds:
    """Document-space rectangle covered by the canvas.

    Inverse-maps the four canvas corners and takes their bounding box.

    Args:
        transform: Current view transform

    Returns:
        Visible bounds in document space
    """
    corners = [
        transform.to_world(Point(0.0, 0.0)),
        transform.to_world(Point(transform.canvas_width, 0.0)),
        transform.to_world(Point(0.0, transform.canvas_height)),
        transform.to_world(Point(transform.canvas_width, transform.canvas_height)),
    ]

    bounds = Bounds.from_point(corners[0])
    for corner in corners[1:]:
        bounds = bounds.include(corner)
    return bounds
