"""Drawable entity types and the parsed document.

Entities form a closed union of frozen dataclasses:
- Line: straight segment between two points
- Circle: full circle with a positive radius
- Arc: counter-clockwise circular arc between two angles in degrees
- Polyline: open or closed chain of at least two vertices

Every constructor validates its invariants, so an Entity value is always
drawable. Extraction code checks its inputs first and never relies on the
raised EntityError for control flow.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dxfview.domain.geometry import Point
from dxfview.exceptions import EntityError


class EntityKind(str, Enum):
    """Entity variant names, matching the DXF marker they usually come from."""

    LINE = "LINE"
    CIRCLE = "CIRCLE"
    ARC = "ARC"
    POLYLINE = "POLYLINE"


def _require_finite(kind: str, name: str, value: float) -> None:
    if not math.isfinite(value):
        raise EntityError(kind, f"{name} must be finite, got {value!r}")


def _require_radius(kind: str, radius: float) -> None:
    _require_finite(kind, "radius", radius)
    if radius <= 0:
        raise EntityError(kind, f"radius must be positive, got {radius!r}")


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    @property
    def kind(self) -> EntityKind:
        return EntityKind.LINE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Circle:
    """A full circle.

    Attributes:
        center: Circle center
        radius: Radius in document units, always > 0
    """

    center: Point
    radius: float

    def __post_init__(self) -> None:
        _require_radius(EntityKind.CIRCLE.value, self.radius)

    @property
    def kind(self) -> EntityKind:
        return EntityKind.CIRCLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "center": self.center.to_dict(),
            "radius": self.radius,
        }


@dataclass(frozen=True, slots=True)
class Arc:
    """A circular arc swept counter-clockwise from start to end angle.

    Angles are in degrees and may lie outside [0, 360); they are normalized
    when the arc is tessellated.

    Attributes:
        center: Arc center
        radius: Radius in document units, always > 0
        start_angle_deg: Start angle in degrees
        end_angle_deg: End angle in degrees
    """

    center: Point
    radius: float
    start_angle_deg: float
    end_angle_deg: float

    def __post_init__(self) -> None:
        kind = EntityKind.ARC.value
        _require_radius(kind, self.radius)
        _require_finite(kind, "start angle", self.start_angle_deg)
        _require_finite(kind, "end angle", self.end_angle_deg)

    @property
    def kind(self) -> EntityKind:
        return EntityKind.ARC

    def point_at(self, angle_deg: float) -> Point:
        """Point on the arc's circle at the given angle.

        Args:
            angle_deg: Angle in degrees, counter-clockwise from +X

        Returns:
            Point in document space
        """
        angle = math.radians(angle_deg)
        return Point(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start_angle_deg)

    @property
    def end_point(self) -> Point:
        return self.point_at(self.end_angle_deg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "start_angle": self.start_angle_deg,
            "end_angle": self.end_angle_deg,
        }


@dataclass(frozen=True, slots=True)
class Polyline:
    """A chain of connected straight segments.

    Both the LWPOLYLINE and the legacy POLYLINE/VERTEX/SEQEND forms produce
    this type.

    Attributes:
        points: Vertices in drawing order, at least two
        closed: Whether the last vertex connects back to the first
    """

    points: tuple[Point, ...]
    closed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))
        if len(self.points) < 2:
            raise EntityError(
                EntityKind.POLYLINE.value,
                f"needs at least 2 vertices, got {len(self.points)}",
            )

    @property
    def kind(self) -> EntityKind:
        return EntityKind.POLYLINE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "points": [p.to_dict() for p in self.points],
            "closed": self.closed,
        }


Entity = Line | Circle | Arc | Polyline


@dataclass(frozen=True)
class Document:
    """Result of parsing one drawing.

    Attributes:
        entities: Extracted entities in source order
        warnings: Non-fatal messages raised while parsing
    """

    entities: tuple[Entity, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entities", tuple(self.entities))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    def is_empty(self) -> bool:
        """Check if the document has no entities."""
        return len(self.entities) == 0

    def count_by_kind(self) -> dict[EntityKind, int]:
        """Count entities per kind.

        Returns:
            Mapping from every EntityKind to its count (zero included)
        """
        counts = Counter(entity.kind for entity in self.entities)
        return {kind: counts.get(kind, 0) for kind in EntityKind}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with entity list and warnings
        """
        return {
            "entities": [entity.to_dict() for entity in self.entities],
            "warnings": list(self.warnings),
        }
