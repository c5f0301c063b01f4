"""Core view and rendering algorithms for dxfview.

This module contains the core algorithms for:

- Bounds computation over entities
- The invertible document-to-screen view transform
- Arc sweep and tessellation
- Adaptive grid planning
- Nearest-vertex snapping
- Stateless rendering onto a path-based surface

All functions are pure and stateless: a ViewTransform is rebuilt from the
document bounds, canvas size and viewport on every call.

Key functions:
- compute_bounds: Axis-aligned bounds of all entities
- create_transform: Build the fit + flip + viewport transform
- visible_world_bounds: Document rectangle covered by the canvas
- tessellate_arc: Approximate an arc by straight segments
- normalize_grid_step / plan_grid: Grid spacing and line positions
- nearest_vertex / find_nearest_vertex: Snap screen positions to vertices
- render: Draw a document onto a surface

Key classes:
- ViewTransform: Forward/inverse coordinate mapping
- Surface / RecordingSurface / RasterSurface: Drawing targets
- DrawingViewer: Load, render, export and snap in one place
"""

from dxfview.core.arcs import ccw_sweep, normalize_degrees, tessellate_arc
from dxfview.core.bounds import compute_bounds
from dxfview.core.colors import normalize_hex_color, parse_hex_color, with_alpha
from dxfview.core.grid import MAX_GRID_LINES, GridPlan, normalize_grid_step, plan_grid
from dxfview.core.raster import RasterSurface
from dxfview.core.renderer import (
    create_transform_for_surface,
    find_nearest_vertex,
    render,
)
from dxfview.core.snapping import collect_vertices, nearest_vertex
from dxfview.core.surface import RecordingSurface, StrokeStyle, Surface
from dxfview.core.transform import ViewTransform, create_transform, visible_world_bounds
from dxfview.core.viewer import DrawingViewer

__all__ = [
    # Viewer
    "DrawingViewer",
    # Grid
    "GridPlan",
    "MAX_GRID_LINES",
    # Surfaces
    "RasterSurface",
    "RecordingSurface",
    "StrokeStyle",
    "Surface",
    # Transform
    "ViewTransform",
    "ccw_sweep",
    "collect_vertices",
    "compute_bounds",
    "create_transform",
    "create_transform_for_surface",
    "find_nearest_vertex",
    "nearest_vertex",
    "normalize_degrees",
    "normalize_grid_step",
    "normalize_hex_color",
    "parse_hex_color",
    "plan_grid",
    "render",
    "tessellate_arc",
    "visible_world_bounds",
    "with_alpha",
]
