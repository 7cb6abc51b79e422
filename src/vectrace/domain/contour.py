"""Core geometric types for traced outlines.

This module defines the geometric types produced by the contour tracer:
- Point: A 2D point in pixel space
- Contour: An implicitly closed sequence of points
- WindingDirection: Enum for contour winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto

MIN_CONTOUR_POINTS = 3


class WindingDirection(Enum):
    """Contour winding direction as seen on screen.

    Pixel space has its y axis pointing down, so a positive shoelace area
    means the contour winds clockwise on screen.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in pixel space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate, growing to the right
        y: Y coordinate, growing downwards
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class Contour:
    """An implicitly closed boundary produced by the contour tracer.

    The last point logically connects back to the first; the closing point is
    never repeated in ``points``.

    Attributes:
        points: Ordered points along the boundary
    """

    points: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def is_valid(self) -> bool:
        """A contour needs at least three points to enclose anything."""
        return len(self.points) >= MIN_CONTOUR_POINTS

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Returns:
            Signed area; 0.0 for contours with fewer than three points
        """
        n = len(self.points)
        if n < MIN_CONTOUR_POINTS:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    def winding(self) -> WindingDirection | None:
        """Winding direction on screen, or None for degenerate contours."""
        area = self.signed_area()
        if area > 0:
            return WindingDirection.CLOCKWISE
        if area < 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return None

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))
