"""Unit tests for bounds computation."""

from dxfview.core.bounds import compute_bounds, extent_points
from dxfview.domain import Arc, Bounds, Circle, Line, Point, Polyline


class TestComputeBounds:
    """Tests for compute_bounds."""

    def test_no_entities(self) -> None:
        """Nothing to draw yields no bounds."""
        assert compute_bounds([]) is None

    def test_line_endpoints(self) -> None:
        assert compute_bounds([Line(Point(2, -1), Point(-3, 4))]) == Bounds(-3, -1, 2, 4)

    def test_polyline_points(self) -> None:
        polyline = Polyline(points=(Point(0, 0), Point(5, 9), Point(-2, 3)))
        assert compute_bounds([polyline]) == Bounds(-2, 0, 5, 9)

    def test_circle_square(self) -> None:
        assert compute_bounds([Circle(Point(1, 1), 2.0)]) == Bounds(-1, -1, 3, 3)

    def test_partial_arc_uses_full_square(self) -> None:
        """A quarter arc still contributes the whole circle's square."""
        arc = Arc(Point(0, 0), 1.0, 0.0, 90.0)
        assert compute_bounds([arc]) == Bounds(-1, -1, 1, 1)

    def test_union_of_entities(self) -> None:
        entities = [
            Line(Point(0, 0), Point(1, 1)),
            Circle(Point(10, 10), 1.0),
        ]
        assert compute_bounds(entities) == Bounds(0, 0, 11, 11)

    def test_single_point_drawing(self) -> None:
        line = Line(Point(4, 4), Point(4, 4))
        bounds = compute_bounds([line])
        assert bounds is not None
        assert bounds.width == 0
        assert bounds.height == 0


class TestExtentPoints:
    """Tests for per-entity extent points."""

    def test_circle_corners(self) -> None:
        assert extent_points(Circle(Point(0, 0), 2.0)) == [Point(-2, -2), Point(2, 2)]
