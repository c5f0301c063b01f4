"""Unit tests for nearest-vertex snapping."""

import pytest

from dxfview.core.snapping import collect_vertices, entity_vertices, nearest_vertex
from dxfview.core.transform import ViewTransform, create_transform
from dxfview.domain import Arc, Bounds, Circle, Line, Point, Polyline


@pytest.fixture
def identity_like() -> ViewTransform:
    """Transform mapping document (x, y) to screen (x, 100 - y)."""
    return create_transform(Bounds(0, 0, 100, 100), 100, 100, 0.0)


class TestCandidates:
    """Tests for candidate vertex enumeration."""

    def test_line_endpoints(self) -> None:
        assert entity_vertices(Line(Point(0, 0), Point(1, 2))) == [Point(0, 0), Point(1, 2)]

    def test_polyline_points(self) -> None:
        points = (Point(0, 0), Point(1, 0), Point(1, 1))
        assert entity_vertices(Polyline(points=points, closed=True)) == list(points)

    def test_arc_endpoints_not_tessellation(self) -> None:
        vertices = entity_vertices(Arc(Point(0, 0), 2.0, 0.0, 90.0))
        assert len(vertices) == 2
        assert vertices[0].x == pytest.approx(2.0)
        assert vertices[1].y == pytest.approx(2.0)

    def test_circle_has_no_candidates(self) -> None:
        assert entity_vertices(Circle(Point(0, 0), 1.0)) == []

    def test_document_order(self) -> None:
        entities = [Line(Point(0, 0), Point(1, 1)), Line(Point(2, 2), Point(3, 3))]
        assert collect_vertices(entities) == [
            Point(0, 0),
            Point(1, 1),
            Point(2, 2),
            Point(3, 3),
        ]


class TestNearestVertex:
    """Tests for the nearest-vertex query."""

    def test_returns_closest_within_radius(self, identity_like: ViewTransform) -> None:
        entities = [Line(Point(10, 10), Point(50, 50))]
        # Document (50, 50) is screen (50, 50); (10, 10) is screen (10, 90).
        assert nearest_vertex(identity_like, entities, 53.0, 48.0, 14.0) == Point(50, 50)

    def test_none_beyond_radius(self, identity_like: ViewTransform) -> None:
        entities = [Line(Point(10, 10), Point(50, 50))]
        assert nearest_vertex(identity_like, entities, 70.0, 50.0, 14.0) is None

    def test_radius_is_inclusive(self, identity_like: ViewTransform) -> None:
        entities = [Line(Point(0, 100), Point(100, 0))]
        # Screen (3, 4) is exactly 5 pixels from screen (0, 0).
        assert nearest_vertex(identity_like, entities, 3.0, 4.0, 5.0) == Point(0, 100)
        assert nearest_vertex(identity_like, entities, 3.0, 4.0, 4.99) is None

    def test_minimum_distance_wins(self, identity_like: ViewTransform) -> None:
        polyline = Polyline(points=(Point(40, 50), Point(45, 50), Point(60, 50)))
        assert nearest_vertex(identity_like, [polyline], 46.0, 50.0, 20.0) == Point(45, 50)

    def test_exact_tie_resolves_to_later_entity(self, identity_like: ViewTransform) -> None:
        """Equal distances go to the vertex enumerated last."""
        first = Line(Point(40, 50), Point(0, 0))
        second = Line(Point(60, 50), Point(100, 100))
        result = nearest_vertex(identity_like, [first, second], 50.0, 50.0, 20.0)
        assert result == Point(60, 50)

    def test_circles_are_never_snapped(self, identity_like: ViewTransform) -> None:
        assert nearest_vertex(identity_like, [Circle(Point(50, 50), 5.0)], 50, 50, 50) is None

    def test_negative_radius_finds_nothing_off_vertex(
        self, identity_like: ViewTransform
    ) -> None:
        entities = [Line(Point(10, 10), Point(50, 50))]
        assert nearest_vertex(identity_like, entities, 51.0, 50.0, -1.0) is None
