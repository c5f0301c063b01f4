"""End-to-end tests from DXF text on disk to rendered pixels."""

from pathlib import Path

import pytest
from PIL import Image

from dxfview.config import CanvasConfig, DisplayConfig, ViewerSettings
from dxfview.core import DrawingViewer, RecordingSurface, render
from dxfview.domain import Arc, Circle, Line, Polyline, RenderOptions
from dxfview.io import BINARY_DXF_WARNING, DxfReader

# A small part: outer frame as legacy POLYLINE, a mounting hole, a fillet arc,
# a slot as LWPOLYLINE and a centre line. Blocks and text must be ignored.
BRACKET_DXF = """  0
SECTION
  2
HEADER
  9
$ACADVER
  1
AC1015
  0
ENDSEC
  0
SECTION
  2
BLOCKS
  0
LINE
 10
-500
 20
-500
 11
500
 21
500
  0
ENDSEC
  0
SECTION
  2
ENTITIES
  0
POLYLINE
  8
OUTLINE
 66
1
 70
1
  0
VERTEX
 10
0.0
 20
0.0
  0
VERTEX
 10
120.0
 20
0.0
  0
VERTEX
 10
120.0
 20
80.0
  0
VERTEX
 10
0.0
 20
80.0
  0
SEQEND
  0
CIRCLE
 10
30.0
 20
40.0
 40
8.0
  0
ARC
 10
120.0
 20
80.0
 40
10.0
 50
180.0
 51
270.0
  0
TEXT
 10
5.0
 20
5.0
  1
BRACKET-01
  0
LWPOLYLINE
 90
4
 70
1
 10
70.0
 20
30.0
 10
100.0
 20
30.0
 10
100.0
 20
50.0
 10
70.0
 20
50.0
  0
LINE
 10
0.0
 20
40.0
 11
120.0
 21
40.0
  0
ENDSEC
  0
EOF
"""


@pytest.fixture
def bracket_path(tmp_path: Path) -> Path:
    """Write the bracket drawing with CRLF line endings."""
    path = tmp_path / "bracket.dxf"
    path.write_bytes(BRACKET_DXF.replace("\n", "\r\n").encode("utf-8"))
    return path


class TestBracketDrawing:
    """Tests for a realistic multi-entity drawing."""

    def test_entities_in_source_order(self, bracket_path: Path) -> None:
        document = DxfReader(bracket_path).load()

        assert [type(entity) for entity in document.entities] == [
            Polyline,
            Circle,
            Arc,
            Polyline,
            Line,
        ]
        outline = document.entities[0]
        assert isinstance(outline, Polyline)
        assert outline.closed is True
        assert len(outline.points) == 4
        assert document.warnings == ()

    def test_record_every_entity(self, bracket_path: Path) -> None:
        """One stroked path per entity when the grid is off."""
        document = DxfReader(bracket_path).load()
        surface = RecordingSurface(640, 480)
        render(surface, document, RenderOptions(show_gridlines=False))
        assert len(surface.operations_named("stroke")) == len(document.entities)

    def test_export_png(self, bracket_path: Path) -> None:
        settings = ViewerSettings(
            display=DisplayConfig(background_color="#000000", line_color="#ffffff"),
            canvas=CanvasConfig(width=240, height=160),
        )
        viewer = DrawingViewer(settings)
        saved = viewer.export_png(bracket_path)

        with Image.open(saved) as image:
            assert image.size == (240, 160)
            colors = image.convert("RGB").getcolors(maxcolors=240 * 160)
        assert colors is not None
        assert len(colors) > 2

    def test_snap_to_outline_corner(self, bracket_path: Path) -> None:
        settings = ViewerSettings(canvas=CanvasConfig(width=240, height=160))
        viewer = DrawingViewer(settings)
        document = viewer.load(bracket_path)

        # Bounds are 130 x 90 (the fillet arc adds its full square), so the
        # origin lands near screen (39, 136).
        corner = viewer.snap(document, 40.0, 135.0)
        assert corner is not None
        assert corner.to_tuple() == (0.0, 0.0)


class TestBinaryInput:
    """Tests for binary DXF input."""

    def test_binary_file_warns_and_renders_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.dxf"
        path.write_bytes(b"AutoCAD Binary DXF\r\n\x1a\x00" + bytes(range(256)))

        viewer = DrawingViewer(ViewerSettings())
        document = viewer.load(path)
        assert BINARY_DXF_WARNING in document.warnings
        assert viewer.stats.warnings == [BINARY_DXF_WARNING]

        surface = RecordingSurface()
        render(surface, document, RenderOptions())
        assert [op for op, _ in surface.operations] == ["clear"]
