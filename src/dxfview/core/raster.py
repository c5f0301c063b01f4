"""Pillow-backed raster surface.

RasterSurface implements the Surface protocol on an RGB image. Logical
coordinates are multiplied by the pixel ratio, so a 400x300 surface at ratio
2 produces an 800x600 image. Drawing goes through an RGBA ImageDraw so
translucent strokes blend with what is already on the image.
"""

import math
from dataclasses import dataclass, field

from PIL import Image, ImageDraw

from dxfview.core.colors import RGBA
from dxfview.core.surface import StrokeStyle


@dataclass
class _SubPath:
    """One sub-path: a polyline, or a full circle when radius is set."""

    points: list[tuple[float, float]] = field(default_factory=list)
    closed: bool = False
    center: tuple[float, float] | None = None
    radius: float = 0.0


def dash_segments(
    points: list[tuple[float, float]], pattern: tuple[float, ...]
) -> list[list[tuple[float, float]]]:
    """Split a polyline into the visible runs of a dash pattern.

    Args:
        points: Polyline vertices
        pattern: Alternating on/off lengths

    Returns:
        List of polylines, one per visible dash
    """
    if not pattern or sum(pattern) <= 0 or len(points) < 2:
        return [points]

    runs: list[list[tuple[float, float]]] = []
    index = 0
    remaining = pattern[0]
    drawing = True
    current: list[tuple[float, float]] = [points[0]]

    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        length = math.hypot(x1 - x0, y1 - y0)
        travelled = 0.0
        while length - travelled > remaining:
            travelled += remaining
            t = travelled / length
            cut = (x0 + (x1 - x0) * t, y0 + (y1 - y0) * t)
            if drawing:
                current.append(cut)
                runs.append(current)
            current = [cut]
            drawing = not drawing
            index = (index + 1) % len(pattern)
            remaining = pattern[index]
        remaining -= length - travelled
        if drawing:
            current.append((x1, y1))
        else:
            current = [(x1, y1)]

    if drawing and len(current) > 1:
        runs.append(current)
    return runs


class RasterSurface:
    """Surface drawing into a Pillow image.

    Example:
        surface = RasterSurface(800, 600, pixel_ratio=2.0)
        render(surface, document, options)
        surface.image.save("drawing.png")
    """

    def __init__(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        """Initialize the surface.

        Args:
            width: Logical width in pixels
            height: Logical height in pixels
            pixel_ratio: Device pixels per logical pixel
        """
        self._width = width
        self._height = height
        self._ratio = pixel_ratio if pixel_ratio > 0 else 1.0
        size = (
            max(1, round(width * self._ratio)),
            max(1, round(height * self._ratio)),
        )
        self._image = Image.new("RGB", size)
        self._draw = ImageDraw.Draw(self._image, "RGBA")
        self._paths: list[_SubPath] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def pixel_ratio(self) -> float:
        return self._ratio

    @property
    def image(self) -> Image.Image:
        """The image drawn so far."""
        return self._image

    def _scaled(self, x: float, y: float) -> tuple[float, float]:
        return (x * self._ratio, y * self._ratio)

    def clear(self, color: RGBA) -> None:
        self._paths = []
        self._draw.rectangle([(0, 0), self._image.size], fill=color[:3])

    def begin_path(self) -> None:
        self._paths = []

    def move_to(self, x: float, y: float) -> None:
        self._paths.append(_SubPath(points=[self._scaled(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._paths or self._paths[-1].center is not None:
            self._paths.append(_SubPath())
        self._paths[-1].points.append(self._scaled(x, y))

    def arc(self, cx: float, cy: float, radius: float) -> None:
        self._paths.append(_SubPath(center=self._scaled(cx, cy), radius=radius * self._ratio))

    def close_path(self) -> None:
        if self._paths:
            self._paths[-1].closed = True

    def stroke(self, style: StrokeStyle) -> None:
        width = max(1, round(style.width * self._ratio))
        dash = tuple(d * self._ratio for d in style.dash) if style.dash else None

        for path in self._paths:
            if path.center is not None:
                if self._circle_visible(path):
                    self._draw.ellipse(self._circle_box(path), outline=style.color, width=width)
                continue

            points = list(path.points)
            if path.closed and len(points) > 1:
                points.append(points[0])
            if len(points) < 2:
                continue

            for run in dash_segments(points, dash) if dash else [points]:
                self._draw.line(run, fill=style.color, width=width, joint="curve")

    def fill(self, color: RGBA) -> None:
        for path in self._paths:
            if path.center is not None:
                self._draw.ellipse(self._circle_box(path), fill=color)
            elif len(path.points) > 2:
                self._draw.polygon(path.points, fill=color)

    @staticmethod
    def _circle_box(path: _SubPath) -> list[tuple[float, float]]:
        assert path.center is not None
        cx, cy = path.center
        r = path.radius
        return [(cx - r, cy - r), (cx + r, cy + r)]

    def _circle_visible(self, path: _SubPath) -> bool:
        """Check whether a circle outline crosses the image at all."""
        assert path.center is not None
        cx, cy = path.center
        w, h = self._image.size
        nearest = math.hypot(cx - min(max(cx, 0), w), cy - min(max(cy, 0), h))
        farthest = max(math.hypot(cx - x, cy - y) for x in (0, w) for y in (0, h))
        return nearest <= path.radius <= farthest
