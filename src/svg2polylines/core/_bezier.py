"""Internal Bezier curve flattening algorithms.

This is an internal module containing the adaptive subdivision used by the
flattening engine. Not intended for public use.

Subdivision runs on an explicit stack of (control points, depth) tasks
instead of recursion, so the depth cap bounds both the number of emitted
segments (at most 2**max_depth per curve) and the working memory.
"""

from collections.abc import Sequence

from svg2polylines.core.geometry import distance_to_segment, split_bezier
from svg2polylines.domain import Point


def is_flat(controls: Sequence[Point], tolerance: float) -> bool:
    """Check whether a Bezier piece can be replaced by its chord.

    The curve lies inside the convex hull of its control points, and the
    distance to a segment is a convex function, so if every inner control
    point is within tolerance of the chord then so is the whole curve.

    Args:
        controls: Control points of the piece
        tolerance: Maximum allowed deviation from the chord

    Returns:
        True if the chord approximates the piece within tolerance
    """
    start = controls[0]
    end = controls[-1]
    return all(
        distance_to_segment(control, start, end) <= tolerance
        for control in controls[1:-1]
    )


def _flatten(controls: tuple[Point, ...], tolerance: float, max_depth: int) -> list[Point]:
    """Flatten a Bezier curve of any degree.

    Returns the accepted on-curve points in curve order, without the start
    point (the caller already has it).
    """
    result: list[Point] = []
    stack: list[tuple[tuple[Point, ...], int]] = [(controls, 0)]

    while stack:
        piece, depth = stack.pop()

        if depth >= max_depth or is_flat(piece, tolerance):
            result.append(piece[-1])
            continue

        left, right = split_bezier(piece)
        # Right half first so the left half is processed next
        stack.append((right, depth + 1))
        stack.append((left, depth + 1))

    return result


def flatten_quadratic(
    points: Sequence[Point],
    tolerance: float,
    max_depth: int,
) -> list[Point]:
    """Flatten a quadratic Bezier curve using adaptive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        max_depth: Maximum subdivision depth

    Returns:
        Points approximating the curve, excluding p0 and ending with p2
    """
    p0, p1, p2 = points
    return _flatten((p0, p1, p2), tolerance, max_depth)


def flatten_cubic(
    points: Sequence[Point],
    tolerance: float,
    max_depth: int,
) -> list[Point]:
    """Flatten a cubic Bezier curve using adaptive subdivision.

    Uses De Casteljau's algorithm for subdivision at t = 0.5.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        max_depth: Maximum subdivision depth

    Returns:
        Points approximating the curve, excluding p0 and ending with p3
    """
    p0, p1, p2, p3 = points
    return _flatten((p0, p1, p2, p3), tolerance, max_depth)
