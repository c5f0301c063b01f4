"""Drawing surface abstraction.

The renderer talks to a minimal path-based surface instead of a concrete
graphics backend. Canvas size and pixel ratio are explicit attributes of the
surface, so a draw is a pure function of its inputs.

Key classes:
- StrokeStyle: Color, width and optional dash pattern for a stroke
- Surface: Protocol every backend implements
- RecordingSurface: Backend that records operations, used in tests and
  for inspecting what a draw would produce
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from dxfview.core.colors import RGBA


@dataclass(frozen=True)
class StrokeStyle:
    """How a path is stroked.

    Attributes:
        color: RGBA stroke color
        width: Line width in logical pixels
        dash: Alternating dash/gap lengths in logical pixels, or None for solid
    """

    color: RGBA
    width: float = 1.0
    dash: tuple[float, ...] | None = None


class Surface(Protocol):
    """Path-based drawing target.

    Coordinates are logical pixels with the origin at the top-left corner.
    A path is started with begin_path, built from move_to/line_to/arc
    sub-paths, and painted with stroke or fill.
    """

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    @property
    def pixel_ratio(self) -> float: ...

    def clear(self, color: RGBA) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(self, cx: float, cy: float, radius: float) -> None: ...

    def close_path(self) -> None: ...

    def stroke(self, style: StrokeStyle) -> None: ...

    def fill(self, color: RGBA) -> None: ...


@dataclass
class RecordingSurface:
    """Surface that records every call as an (operation, args) tuple.

    Example:
        surface = RecordingSurface(400, 300)
        render(surface, document, options)
        strokes = surface.operations_named("stroke")
    """

    width: float = 800.0
    height: float = 600.0
    pixel_ratio: float = 1.0
    operations: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def _record(self, name: str, *args: Any) -> None:
        self.operations.append((name, args))

    def clear(self, color: RGBA) -> None:
        self.operations.clear()
        self._record("clear", color)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(self, cx: float, cy: float, radius: float) -> None:
        self._record("arc", cx, cy, radius)

    def close_path(self) -> None:
        self._record("close_path")

    def stroke(self, style: StrokeStyle) -> None:
        self._record("stroke", style)

    def fill(self, color: RGBA) -> None:
        self._record("fill", color)

    def operations_named(self, name: str) -> list[tuple[Any, ...]]:
        """Arguments of every recorded call with the given operation name."""
        return [args for op, args in self.operations if op == name]

    def paths(self) -> list[list[tuple[str, tuple[Any, ...]]]]:
        """Group recorded operations into painted paths.

        Each group holds the operations between a begin_path and the
        stroke/fill that painted it, including that final call.
        """
        groups: list[list[tuple[str, tuple[Any, ...]]]] = []
        current: list[tuple[str, tuple[Any, ...]]] | None = None
        for op, args in self.operations:
            if op == "begin_path":
                current = []
                continue
            if current is None:
                continue
            current.append((op, args))
            if op in ("stroke", "fill"):
                groups.append(current)
                current = [entry for entry in current if entry[0] not in ("stroke", "fill")]
        return groups
