"""Elliptical arc to cubic Bezier conversion.

Implements the SVG arc implementation notes: the arc given in endpoint
parameterization (radii, rotation, flags, endpoints) is converted to center
parameterization, its sweep is split into pieces of at most 90 degrees, and
each piece is approximated by one cubic Bezier segment.
"""

import math

from svg2polylines.domain import Point

# (control1, control2, end) of one cubic segment; the start is implicit
CubicSegment = tuple[Point, Point, Point]

_QUARTER_TURN = math.pi / 2.0
_EPSILON = 1e-9


def _angle_between(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from vector u to vector v, in radians."""
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def arc_to_cubics(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> list[CubicSegment] | None:
    """Convert an elliptical arc to cubic Bezier segments.

    Radii too small to connect the endpoints are scaled up uniformly, as
    the SVG specification requires. The first segment starts exactly at
    start and the last one ends exactly at end.

    Args:
        start: Current point (arc start)
        rx: X radius; the sign is ignored
        ry: Y radius; the sign is ignored
        rotation: Rotation of the ellipse x-axis in degrees
        large_arc: Choose the arc spanning more than 180 degrees
        sweep: Draw in the positive-angle direction
        end: Arc end point

    Returns:
        Between one and four cubic segments, or None when the arc is
        degenerate (coincident endpoints, a zero radius, or coordinates
        outside the finite float range) and should be treated as a
        straight line to end

    Examples:
        >>> segments = arc_to_cubics(Point(0, 0), 5, 5, 0, False, True, Point(10, 0))
        >>> len(segments)
        2
    """
    if start == end:
        return None
    if not all(math.isfinite(v) for v in (start.x, start.y, end.x, end.y, rx, ry, rotation)):
        return None

    rx = abs(rx)
    ry = abs(ry)
    # Radii whose squares underflow are as good as zero
    if rx * rx == 0.0 or ry * ry == 0.0:
        return None

    phi = math.radians(rotation % 360.0)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Step 1: transformed midpoint
    half_dx = (start.x - end.x) / 2.0
    half_dy = (start.y - end.y) / 2.0
    x1p = cos_phi * half_dx + sin_phi * half_dy
    y1p = -sin_phi * half_dx + cos_phi * half_dy

    # Scale radii up if the ellipse cannot reach both endpoints
    radii_check = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if radii_check > 1.0:
        scale = math.sqrt(radii_check)
        rx *= scale
        ry *= scale

    # Step 2: transformed center
    rx_sq = rx * rx
    ry_sq = ry * ry
    numerator = rx_sq * ry_sq - rx_sq * y1p * y1p - ry_sq * x1p * x1p
    denominator = rx_sq * y1p * y1p + ry_sq * x1p * x1p
    if denominator == 0.0:
        return None
    coefficient = math.sqrt(max(0.0, numerator / denominator))
    if large_arc == sweep:
        coefficient = -coefficient
    cxp = coefficient * rx * y1p / ry
    cyp = -coefficient * ry * x1p / rx

    # Step 3: center in user space
    cx = cos_phi * cxp - sin_phi * cyp + (start.x + end.x) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (start.y + end.y) / 2.0

    # Step 4: start angle and sweep extent
    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry
    theta1 = math.atan2(uy, ux)
    delta_theta = _angle_between(ux, uy, vx, vy)
    if sweep and delta_theta < 0.0:
        delta_theta += 2.0 * math.pi
    elif not sweep and delta_theta > 0.0:
        delta_theta -= 2.0 * math.pi
    if not (math.isfinite(delta_theta) and math.isfinite(cx) and math.isfinite(cy)):
        return None

    segment_count = max(1, math.ceil(abs(delta_theta) / _QUARTER_TURN - _EPSILON))
    step = delta_theta / segment_count
    handle = 4.0 / 3.0 * math.tan(step / 4.0)

    def ellipse_point(angle: float) -> Point:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Point(
            cx + rx * cos_a * cos_phi - ry * sin_a * sin_phi,
            cy + rx * cos_a * sin_phi + ry * sin_a * cos_phi,
        )

    def ellipse_derivative(angle: float) -> tuple[float, float]:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return (
            -rx * sin_a * cos_phi - ry * cos_a * sin_phi,
            -rx * sin_a * sin_phi + ry * cos_a * cos_phi,
        )

    segments: list[CubicSegment] = []
    segment_start = start
    for i in range(segment_count):
        angle1 = theta1 + i * step
        angle2 = angle1 + step
        d1x, d1y = ellipse_derivative(angle1)
        d2x, d2y = ellipse_derivative(angle2)
        segment_end = end if i == segment_count - 1 else ellipse_point(angle2)
        control1 = Point(segment_start.x + handle * d1x, segment_start.y + handle * d1y)
        control2 = Point(segment_end.x - handle * d2x, segment_end.y - handle * d2y)
        segments.append((control1, control2, segment_end))
        segment_start = segment_end

    return segments
