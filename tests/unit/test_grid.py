"""Unit tests for adaptive grid planning."""

import pytest

from dxfview.core.grid import (
    MAX_GRID_LINES,
    grid_positions,
    normalize_grid_step,
    plan_grid,
)
from dxfview.core.transform import create_transform
from dxfview.domain import Bounds, Viewport


class TestNormalizeGridStep:
    """Tests for step doubling."""

    def test_ten_thousand_unit_span(self) -> None:
        """A 1-unit base over a 10,000-unit span doubles once."""
        step = normalize_grid_step(1.0, 10_000.0)
        assert step == 2.0
        assert 10_000.0 / step <= MAX_GRID_LINES

    def test_small_span_keeps_base(self) -> None:
        """Zooming in never refines below the base step."""
        assert normalize_grid_step(1.0, 3.0) == 1.0

    def test_large_span(self) -> None:
        step = normalize_grid_step(1.0, 1e7)
        assert 1e7 / step <= MAX_GRID_LINES
        assert 1e7 / (step / 2) > MAX_GRID_LINES

    def test_custom_budget(self) -> None:
        assert normalize_grid_step(1.0, 100.0, max_lines=10) == 16.0

    def test_non_positive_base_is_floored(self) -> None:
        step = normalize_grid_step(0.0, 1.0)
        assert step > 0


class TestGridPositions:
    """Tests for line positions."""

    def test_covers_range_on_multiples(self) -> None:
        assert grid_positions(-2.5, 2.5, 1.0) == [-3.0, -2.0, -1.0, 0.0, 1.0, 2.0, 3.0]

    def test_capped(self) -> None:
        positions = grid_positions(0.0, 1000.0, 1.0, max_lines=10)
        assert len(positions) == 10
        assert positions[0] == 0.0


class TestPlanGrid:
    """Tests for whole-frame grid plans."""

    def test_axes_visible_when_origin_in_view(self) -> None:
        transform = create_transform(Bounds(-10, -10, 10, 10), 400, 400, 0.0)
        plan = plan_grid(transform, 1.0)
        assert plan.show_x_axis
        assert plan.show_y_axis
        assert plan.step_x == 1.0
        assert plan.xs[0] <= plan.visible.min_x
        assert plan.xs[-1] >= plan.visible.max_x

    def test_axes_hidden_when_origin_out_of_view(self) -> None:
        transform = create_transform(Bounds(100, 100, 110, 110), 400, 400, 0.0)
        plan = plan_grid(transform, 1.0)
        assert not plan.show_x_axis
        assert not plan.show_y_axis

    def test_zoomed_out_grid_is_bounded(self) -> None:
        """Extreme zoom-out coarsens the step instead of adding lines."""
        transform = create_transform(
            Bounds(0, 0, 100_000, 100_000), 800, 600, 0.0, Viewport(zoom=0.02)
        )
        plan = plan_grid(transform, 1.0)
        assert plan.visible.width / plan.step_x <= MAX_GRID_LINES
        assert len(plan.xs) <= MAX_GRID_LINES
        assert len(plan.ys) <= MAX_GRID_LINES

    def test_axes_planned_independently(self) -> None:
        transform = create_transform(Bounds(0, 0, 20_000, 1), 800, 80, 0.0)
        plan = plan_grid(transform, 1.0)
        assert plan.step_x > plan.step_y

    @pytest.mark.parametrize("zoom", [0.5, 1.0, 10.0])
    def test_lines_cover_visible_area(self, zoom: float) -> None:
        transform = create_transform(Bounds(0, 0, 50, 50), 500, 500, 0.0, Viewport(zoom=zoom))
        plan = plan_grid(transform, 1.0)
        assert plan.ys[0] <= plan.visible.min_y
        assert plan.ys[-1] >= plan.visible.max_y
