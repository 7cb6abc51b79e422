"""Boundary-following contour extraction over a binary grid.

A simplified marching-squares walk. Every 2x2 block of pixels forms a cell,
addressed by its top-left pixel, and classified by a 4-bit code built from its
corners. Cells mixing foreground and background lie on a boundary; starting from
the first unvisited boundary cell in row-major order, the tracer steps from cell
to cell in the direction the lookup table gives for each code until it arrives
back at the start.

Saddle cells (codes 5 and 10) are not disambiguated: the walk keeps its current
direction through them, as it does through uniform cells.

The walk and the scan are bounded by hard caps. Hitting a cap truncates the
result silently; the output is whatever was found up to that point.
"""

from collections.abc import Iterator

import numpy as np

from vectrace.domain import BinaryGrid, Contour, Point

MAX_WALK_STEPS = 5000
MAX_CONTOURS = 500
SCAN_YIELD_ROWS = 100

# Noise floor: a walk needs min_size * MIN_SIZE_FACTOR points to be kept
MIN_SIZE_FACTOR = 3

# Direction codes: 0 = +x, 1 = +y, 2 = -x, 3 = -y
DIRECTION_STEPS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

# Next direction per cell code (tl=8, tr=4, br=2, bl=1). Codes missing here keep
# the current direction.
NEXT_DIRECTION: dict[int, int] = {
    1: 2,
    2: 1,
    3: 2,
    4: 0,
    6: 1,
    7: 2,
    8: 3,
    9: 3,
    11: 3,
    12: 0,
    13: 0,
    14: 1,
}

EMPTY_CELL = 0
FULL_CELL = 15


def cell_codes(grid: BinaryGrid) -> np.ndarray:
    """Marching-squares code of every cell.

    Args:
        grid: Binary grid of at least 2x2 pixels

    Returns:
        Integer array of shape (height - 1, width - 1)
    """
    cells = grid.cells.astype(np.uint8)
    return (
        cells[:-1, :-1] * 8
        + cells[:-1, 1:] * 4
        + cells[1:, 1:] * 2
        + cells[1:, :-1]
    )


def trace_contour(
    codes: list[list[int]],
    start_x: int,
    start_y: int,
    visited: set[tuple[int, int]],
    max_steps: int = MAX_WALK_STEPS,
) -> list[Point]:
    """Walk one boundary starting at cell (start_x, start_y).

    The walk ends when it returns to the start cell, when it would step off
    the grid, or after ``max_steps`` cells. Every cell it passes through is
    added to ``visited``.

    Args:
        codes: Cell codes as nested lists, indexed [y][x]
        start_x: Column of the start cell
        start_y: Row of the start cell
        visited: Cells already claimed by a walk, updated in place
        max_steps: Maximum number of cells to visit

    Returns:
        Points at (x + 0.5, y + 0.5) for each visited cell, in walk order
    """
    rows = len(codes)
    cols = len(codes[0]) if rows else 0
    points: list[Point] = []
    x, y = start_x, start_y
    direction = 0

    for _ in range(max_steps):
        visited.add((x, y))
        points.append(Point(x + 0.5, y + 0.5))

        direction = NEXT_DIRECTION.get(codes[y][x], direction)
        dx, dy = DIRECTION_STEPS[direction]
        x += dx
        y += dy

        if x < 0 or x >= cols or y < 0 or y >= rows:
            break
        if x == start_x and y == start_y:
            break

    return points


def iter_find_contours(
    grid: BinaryGrid,
    min_size: int,
    contours: list[Contour],
    scan_yield_rows: int = SCAN_YIELD_ROWS,
) -> Iterator[int]:
    """Scan ``grid`` for boundaries, appending accepted walks to ``contours``.

    Each yield is a suspension point; the value yielded is the number of rows
    scanned so far.

    Args:
        grid: Binary grid to scan
        min_size: Noise floor; walks with fewer than ``min_size * 3`` points
            are discarded
        contours: Output list, appended to in place
        scan_yield_rows: Rows scanned between yields

    Yields:
        Number of rows scanned
    """
    if grid.width < 2 or grid.height < 2:
        return

    codes = cell_codes(grid).tolist()
    rows = grid.height - 1
    cols = grid.width - 1
    min_points = min_size * MIN_SIZE_FACTOR
    max_steps = min(grid.width * grid.height, MAX_WALK_STEPS)
    visited: set[tuple[int, int]] = set()

    for y in range(rows):
        if len(contours) >= MAX_CONTOURS:
            break

        row = codes[y]
        for x in range(cols):
            if len(contours) >= MAX_CONTOURS:
                break
            if (x, y) in visited:
                continue

            code = row[x]
            if code == EMPTY_CELL or code == FULL_CELL:
                continue

            points = trace_contour(codes, x, y, visited, max_steps)
            if len(points) >= min_points:
                contours.append(Contour(points=points))

        if (y + 1) % scan_yield_rows == 0:
            yield y + 1


def find_contours(grid: BinaryGrid, min_size: int) -> list[Contour]:
    """Extract all boundaries of ``grid``.

    Args:
        grid: Binary grid to scan
        min_size: Noise floor (turd size)

    Returns:
        Contours in discovery order, at most MAX_CONTOURS of them
    """
    contours: list[Contour] = []
    for _ in iter_find_contours(grid, min_size, contours):
        pass
    return contours
