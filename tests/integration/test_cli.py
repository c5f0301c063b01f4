"""Integration tests for the command-line interface."""

from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from dxfview import __version__
from dxfview.cli.app import app, parse_point
from dxfview.cli.output import format_distance, format_measurement
from dxfview.domain import Point

runner = CliRunner()

LINE_DXF = "\n".join(
    [
        "0", "SECTION", "2", "ENTITIES",
        "0", "LINE", "10", "0", "20", "0", "11", "10", "21", "5",
        "0", "ENDSEC", "0", "EOF",
    ]
)


@pytest.fixture
def line_drawing(tmp_path: Path) -> Path:
    """Write a drawing with a single line from (0, 0) to (10, 5)."""
    path = tmp_path / "line.dxf"
    path.write_text(LINE_DXF, encoding="utf-8")
    return path


@pytest.fixture
def empty_drawing(tmp_path: Path) -> Path:
    path = tmp_path / "empty.dxf"
    path.write_text("0\nEOF\n", encoding="utf-8")
    return path


class TestFormatting:
    """Tests for distance formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(123.456, "123.5"), (100.0, "100.0"), (12.3456, "12.35"), (1.23456, "1.235")],
    )
    def test_format_distance(self, value: float, expected: str) -> None:
        assert format_distance(value) == expected

    def test_format_measurement_units(self) -> None:
        assert format_measurement(5.0) == "5.000 mm"
        assert format_measurement(254.0, use_inches=True) == "10.00 in"

    def test_parse_point(self) -> None:
        assert parse_point("1.5,-2") == Point(1.5, -2.0)

    @pytest.mark.parametrize("value", ["1", "1,2,3", "a,b"])
    def test_parse_point_rejects_invalid(self, value: str) -> None:
        import typer

        with pytest.raises(typer.BadParameter):
            parse_point(value)


class TestVersion:
    """Tests for --version."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestInfoCommand:
    """Tests for `dxfview info`."""

    def test_info(self, line_drawing: Path) -> None:
        result = runner.invoke(app, ["info", str(line_drawing)])
        assert result.exit_code == 0
        assert "LINE" in result.output
        assert "CIRCLE" in result.output
        assert "10 x 5" in result.output

    def test_info_empty_drawing(self, empty_drawing: Path) -> None:
        result = runner.invoke(app, ["info", str(empty_drawing)])
        assert result.exit_code == 0
        assert "No drawable extents" in result.output

    def test_info_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["info", str(tmp_path / "missing.dxf")])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestRenderCommand:
    """Tests for `dxfview render`."""

    def test_render_default_output(self, line_drawing: Path) -> None:
        result = runner.invoke(
            app, ["render", str(line_drawing), "--width", "200", "--height", "100"]
        )
        assert result.exit_code == 0, result.output
        output = line_drawing.with_suffix(".png")
        with Image.open(output) as image:
            assert image.size == (200, 100)

    def test_render_explicit_output_and_ratio(self, line_drawing: Path, tmp_path: Path) -> None:
        output = tmp_path / "renders" / "line@2x.png"
        result = runner.invoke(
            app,
            [
                "render", str(line_drawing),
                "-o", str(output),
                "--width", "120", "--height", "80", "--ratio", "2",
                "--no-grid", "--zoom", "1.5", "--pan-x", "10",
                "--line-color", "#fff", "--background-color", "#000",
            ],
        )
        assert result.exit_code == 0, result.output
        with Image.open(output) as image:
            assert image.size == (240, 160)

    def test_render_reports_distance(self, line_drawing: Path) -> None:
        result = runner.invoke(
            app,
            ["render", str(line_drawing), "--measure-from", "0,0", "--measure-to", "3,4"],
        )
        assert result.exit_code == 0, result.output
        assert "5.000 mm" in result.output

    def test_render_reports_distance_in_inches(self, line_drawing: Path) -> None:
        result = runner.invoke(
            app,
            [
                "render", str(line_drawing),
                "--measure-from", "0,0", "--measure-to", "3,4", "--inches",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "0.197 in" in result.output

    def test_render_quiet(self, line_drawing: Path) -> None:
        result = runner.invoke(app, ["render", str(line_drawing), "-q"])
        assert result.exit_code == 0
        assert "Complete" not in result.output
        assert line_drawing.with_suffix(".png").exists()

    def test_render_empty_drawing_fails(self, empty_drawing: Path) -> None:
        result = runner.invoke(app, ["render", str(empty_drawing)])
        assert result.exit_code == 1
        assert "No entities" in result.output
        assert not empty_drawing.with_suffix(".png").exists()

    def test_render_missing_file_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.dxf")])
        assert result.exit_code == 1
        assert "Could not read drawing" in result.output

    def test_render_invalid_color_fails(self, line_drawing: Path) -> None:
        result = runner.invoke(app, ["render", str(line_drawing), "--line-color", "blue"])
        assert result.exit_code == 1
        assert not line_drawing.with_suffix(".png").exists()

    def test_render_bad_measure_point(self, line_drawing: Path) -> None:
        result = runner.invoke(app, ["render", str(line_drawing), "--measure-from", "oops"])
        assert result.exit_code == 2

    def test_render_canvas_too_small(self, line_drawing: Path) -> None:
        result = runner.invoke(app, ["render", str(line_drawing), "--width", "5"])
        assert result.exit_code == 2

    def test_render_writes_log_file(self, line_drawing: Path, tmp_path: Path) -> None:
        log_file = tmp_path / "render.log"
        result = runner.invoke(
            app, ["render", str(line_drawing), "--log-file", str(log_file), "-q"]
        )
        assert result.exit_code == 0
        assert "Image saved" in log_file.read_text(encoding="utf-8")


class TestSnapCommand:
    """Tests for `dxfview snap`."""

    def test_snap_hit(self, line_drawing: Path) -> None:
        # With the default 800x600 canvas and 24px padding, (0, 0) is at (24, 488).
        result = runner.invoke(app, ["snap", str(line_drawing), "26", "486"])
        assert result.exit_code == 0
        assert "snapped to" in result.output
        assert "(0, 0)" in result.output

    def test_snap_miss(self, line_drawing: Path) -> None:
        result = runner.invoke(app, ["snap", str(line_drawing), "400", "100"])
        assert result.exit_code == 0
        assert "No vertex near" in result.output

    def test_snap_radius(self, line_drawing: Path) -> None:
        """A point 20px from the vertex only snaps with a wider radius."""
        args = ["snap", str(line_drawing), "44", "488"]

        assert "No vertex near" in runner.invoke(app, args).output
        result = runner.invoke(app, [*args, "--radius", "25"])
        assert result.exit_code == 0
        assert "snapped to" in result.output

    def test_snap_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["snap", str(tmp_path / "missing.dxf"), "1", "1"])
        assert result.exit_code == 1
