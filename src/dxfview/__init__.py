"""dxfview - Parse, render and measure 2D DXF drawings.

dxfview reads ASCII DXF files, extracts lines, circles, arcs and polylines
from the ENTITIES section, and renders them through a pan/zoom view transform
onto a raster surface. Vertices can be snapped for point-to-point measurement.

Example:
    $ dxfview render bracket.dxf --zoom 2

This will create bracket.png next to the input drawing.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
