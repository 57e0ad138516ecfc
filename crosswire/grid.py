"""Visited-cell bookkeeping for crosswire."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

ORIGIN = (0, 0)


@dataclass
class VisitedCell:
    x: int
    y: int
    # Sum of the wire indices of every visit, repeats included.
    marker: int

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


class Grid:
    """All cells touched by the wires, in discovery order.

    The origin is present from the start with the first wire's marker.
    """

    def __init__(self, seed_origin: bool = True):
        self._cells: Dict[Tuple[int, int], VisitedCell] = {}
        if seed_origin:
            self._cells[ORIGIN] = VisitedCell(ORIGIN[0], ORIGIN[1], 1)

    def upsert(self, x: int, y: int, wire: int) -> VisitedCell:
        """Record a visit by ``wire`` at (x, y).

        A new cell starts with ``marker = wire``; an existing cell has
        ``wire`` added to its marker, even if the same wire was there before.
        """
        cell = self._cells.get((x, y))
        if cell is None:
            cell = VisitedCell(x, y, wire)
            self._cells[(x, y)] = cell
        else:
            cell.marker += wire
        return cell

    def get(self, x: int, y: int) -> Optional[VisitedCell]:
        return self._cells.get((x, y))

    def cells(self) -> List[VisitedCell]:
        return list(self._cells.values())

    def __contains__(self, position) -> bool:
        return tuple(position) in self._cells

    def __iter__(self) -> Iterator[VisitedCell]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)
