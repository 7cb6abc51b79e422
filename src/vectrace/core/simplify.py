"""Douglas-Peucker polyline simplification.

All functions are pure and stateless.
"""

import math

from vectrace.domain import Point

# Raw tolerance settings are doubled before use as the simplification epsilon
TOLERANCE_SCALE = 2.0


def tolerance_to_epsilon(tolerance: float) -> float:
    """Convert a caller's tolerance setting to a simplification epsilon."""
    return tolerance * TOLERANCE_SCALE


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from ``point`` to the line through ``line_start`` and ``line_end``.

    When the two line points coincide, the straight-line distance to that
    point is returned instead.

    Examples:
        >>> perpendicular_distance(Point(1.0, 1.0), Point(0.0, 0.0), Point(2.0, 0.0))
        1.0
        >>> perpendicular_distance(Point(3.0, 4.0), Point(0.0, 0.0), Point(0.0, 0.0))
        5.0
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    mag_sq = dx * dx + dy * dy

    if mag_sq == 0:
        return math.hypot(point.x - line_start.x, point.y - line_start.y)

    u = ((point.x - line_start.x) * dx + (point.y - line_start.y) * dy) / mag_sq
    closest_x = line_start.x + u * dx
    closest_y = line_start.y + u * dy
    return math.hypot(point.x - closest_x, point.y - closest_y)


def simplify(points: list[Point], epsilon: float) -> list[Point]:
    """Reduce ``points`` with the Douglas-Peucker algorithm.

    The span between two kept points is split at its farthest interior point
    when that point lies more than ``epsilon`` from the span's chord, and
    collapsed to its endpoints otherwise. Spans are processed from an explicit
    stack so long contours cannot exhaust the interpreter's recursion limit;
    the kept points are exactly those the recursive formulation keeps.

    Args:
        points: Polyline to simplify
        epsilon: Maximum allowed deviation

    Returns:
        New list with the retained points in their original order. Inputs of
        two or fewer points are returned unchanged.
    """
    n = len(points)
    if n <= 2:
        return points

    keep = [False] * n
    keep[0] = True
    keep[n - 1] = True
    spans = [(0, n - 1)]

    while spans:
        first, last = spans.pop()
        if last - first < 2:
            continue

        start = points[first]
        end = points[last]
        max_dist = 0.0
        max_idx = first

        for i in range(first + 1, last):
            dist = perpendicular_distance(points[i], start, end)
            if dist > max_dist:
                max_dist = dist
                max_idx = i

        if max_dist > epsilon and max_idx > first:
            keep[max_idx] = True
            spans.append((max_idx, last))
            spans.append((first, max_idx))

    return [p for p, kept in zip(points, keep) if kept]
