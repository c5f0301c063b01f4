"""Nearest-vertex queries for measurement snapping.

Candidate vertices are line endpoints, polyline points and arc endpoints.
Circles have no distinguished vertex and contribute nothing.
"""

from collections.abc import Iterable

from dxfview.core.transform import ViewTransform
from dxfview.domain import Arc, Entity, Line, Point, Polyline


def entity_vertices(entity: Entity) -> list[Point]:
    """Snap candidates of a single entity, in enumeration order."""
    if isinstance(entity, Line):
        return [entity.start, entity.end]
    if isinstance(entity, Polyline):
        return list(entity.points)
    if isinstance(entity, Arc):
        return [entity.start_point, entity.end_point]
    return []


def collect_vertices(entities: Iterable[Entity]) -> list[Point]:
    """Snap candidates of all entities in document order."""
    vertices: list[Point] = []
    for entity in entities:
        vertices.extend(entity_vertices(entity))
    return vertices


def nearest_vertex(
    transform: ViewTransform,
    entities: Iterable[Entity],
    screen_x: float,
    screen_y: float,
    max_distance: float,
) -> Point | None:
    """Find the candidate vertex closest to a screen position.

    Distances are measured in screen pixels. A candidate at exactly the
    current best distance replaces it, so on exact ties the vertex
    enumerated last (the later entity in the document) wins.

    Args:
        transform: Current view transform
        entities: Entities to search
        screen_x: Query X in canvas pixels
        screen_y: Query Y in canvas pixels
        max_distance: Search radius in pixels, inclusive

    Returns:
        Document-space vertex, or None if nothing lies within the radius
    """
    best_distance_sq = max(max_distance, 0.0) ** 2
    best: Point | None = None

    for vertex in collect_vertices(entities):
        projected = transform.to_screen(vertex)
        dx = projected.x - screen_x
        dy = projected.y - screen_y
        distance_sq = dx * dx + dy * dy
        if distance_sq <= best_distance_sq:
            best_distance_sq = distance_sq
            best = vertex

    return best
