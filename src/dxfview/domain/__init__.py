"""Domain models for dxfview.

This module contains the value types shared by parsing, rendering and
measuring. All models are:

- Immutable (frozen dataclasses)
- Independent of any drawing backend

Key classes:
- Point, Bounds: Basic geometry
- Line, Circle, Arc, Polyline: The Entity union
- Document: Parsed entities plus warnings
- Viewport, Measurement, RenderOptions: Per-draw view state
"""

from dxfview.domain.entities import (
    Arc,
    Circle,
    Document,
    Entity,
    EntityKind,
    Line,
    Polyline,
)
from dxfview.domain.geometry import Bounds, Point
from dxfview.domain.view import (
    ZOOM_MAX,
    ZOOM_MIN,
    Measurement,
    RenderOptions,
    Viewport,
    clamp_zoom,
)

__all__: list[str] = [
    # Enums
    "EntityKind",
    # Geometry
    "Bounds",
    "Point",
    # Entities
    "Arc",
    "Circle",
    "Entity",
    "Line",
    "Polyline",
    "Document",
    # View state
    "Measurement",
    "RenderOptions",
    "Viewport",
    "ZOOM_MAX",
    "ZOOM_MIN",
    "clamp_zoom",
]
