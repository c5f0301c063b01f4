"""Bounding box computation over drawing entities."""

from collections.abc import Iterable

from dxfview.domain import Arc, Bounds, Circle, Entity, Line, Point, Polyline


def extent_points(entity: Entity) -> list[Point]:
    """Return the points whose bounding box covers the entity.

    Circles and arcs contribute the full square around their center, which
    is a superset of a partial arc's true extent.

    Args:
        entity: Any entity

    Returns:
        Points in document space
    """
    if isinstance(entity, Line):
        return [entity.start, entity.end]
    if isinstance(entity, Polyline):
        return list(entity.points)
    if isinstance(entity, (Circle, Arc)):
        center, radius = entity.center, entity.radius
        return [
            Point(center.x - radius, center.y - radius),
            Point(center.x + radius, center.y + radius),
        ]
    return []


def compute_bounds(entities: Iterable[Entity]) -> Bounds | None:
    """Compute the axis-aligned bounds of all entities.

    Args:
        entities: Entities to cover

    Returns:
        Bounds, or None when there are no entities
    """
    bounds: Bounds | None = None
    for entity in entities:
        for point in extent_points(entity):
            bounds = Bounds.from_point(point) if bounds is None else bounds.include(point)
    return bounds
