"""Intersection search over a traced Grid."""

from typing import Iterator, Optional

from crosswire.grid import ORIGIN, Grid, VisitedCell

# Marker of a cell visited exactly once by wire 1 and once by wire 2.
CROSSING_MARKER = 1 + 2


def manhattan(cell: VisitedCell) -> int:
    return abs(cell.x) + abs(cell.y)


def is_intersection(cell: VisitedCell) -> bool:
    """True for a non-origin cell crossed once by each wire.

    Cells a wire revisited on its own pass carry a larger marker and do
    not count.
    """
    return cell.marker == CROSSING_MARKER and cell.position != ORIGIN


def intersections(grid: Grid) -> Iterator[VisitedCell]:
    """Intersections in discovery order."""
    return (cell for cell in grid if is_intersection(cell))


def nearest_intersection(grid: Grid) -> Optional[int]:
    """Smallest Manhattan distance to an intersection, or None if there is none."""
    return min((manhattan(cell) for cell in intersections(grid)), default=None)
