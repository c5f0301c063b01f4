"""Arc sweep and tessellation.

Arcs always sweep counter-clockwise from the start angle to the end angle.
An arc whose normalized angles coincide sweeps a full turn, matching circle
semantics.
"""

import math

from dxfview.domain import Arc, Point

MIN_ARC_SEGMENTS = 12
ARC_SEGMENT_ANGLE = math.pi / 18


def normalize_degrees(value: float) -> float:
    """Map an angle in degrees into [0, 360)."""
    normalized = math.fmod(value, 360.0)
    if normalized < 0:
        normalized += 360.0
    return normalized


def ccw_sweep(start_deg: float, end_deg: float) -> float:
    """Counter-clockwise sweep from start to end angle.

    Args:
        start_deg: Start angle in degrees
        end_deg: End angle in degrees

    Returns:
        Sweep in radians, in (0, 2*pi]
    """
    start = normalize_degrees(start_deg)
    end = normalize_degrees(end_deg)
    delta = math.fmod(end - start + 360.0, 360.0)
    return math.radians(360.0 if delta == 0 else delta)


def arc_segment_count(sweep_rad: float) -> int:
    """Number of straight segments used to draw a sweep, about one per 10 degrees."""
    return max(MIN_ARC_SEGMENTS, math.ceil(sweep_rad / ARC_SEGMENT_ANGLE))


def tessellate_arc(arc: Arc) -> list[Point]:
    """Approximate an arc by a polyline in document space.

    Args:
        arc: Arc to tessellate

    Returns:
        segments + 1 points from the start angle to the end angle
    """
    start_rad = math.radians(arc.start_angle_deg)
    sweep = ccw_sweep(arc.start_angle_deg, arc.end_angle_deg)
    segments = arc_segment_count(sweep)

    points: list[Point] = []
    for i in range(segments + 1):
        angle = start_rad + sweep * i / segments
        points.append(
            Point(
                arc.center.x + arc.radius * math.cos(angle),
                arc.center.y + arc.radius * math.sin(angle),
            )
        )
    return points
