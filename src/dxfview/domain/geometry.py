"""Core geometric value types.

This module defines the fundamental geometric types shared by the parser,
the view transform and the renderer:
- Point: A 2D coordinate, used for both document and screen space
- Bounds: An axis-aligned bounding box in document space
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Document points are Y-up,
    screen points are Y-down pixels; the type does not distinguish them.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Smallest X coordinate
        min_y: Smallest Y coordinate
        max_x: Largest X coordinate
        max_y: Largest Y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_point(cls, point: Point) -> "Bounds":
        """Create zero-size bounds around a single point."""
        return cls(point.x, point.y, point.x, point.y)

    @property
    def width(self) -> float:
        """Extent along the X axis."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Extent along the Y axis."""
        return self.max_y - self.min_y

    def include(self, point: Point) -> "Bounds":
        """Return bounds widened to contain the given point.

        Args:
            point: Point that must lie inside the result

        Returns:
            New Bounds instance
        """
        return Bounds(
            min(self.min_x, point.x),
            min(self.min_y, point.y),
            max(self.max_x, point.x),
            max(self.max_y, point.y),
        )

    def contains_x(self, x: float) -> bool:
        """Check whether x lies within [min_x, max_x]."""
        return self.min_x <= x <= self.max_x

    def contains_y(self, y: float) -> bool:
        """Check whether y lies within [min_y, max_y]."""
        return self.min_y <= y <= self.max_y

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }
