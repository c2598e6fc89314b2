"""Per-run bookkeeping for a single search."""

from __future__ import annotations

from math import inf
from typing import Dict, Optional, Set

from ..core.grid import Coord


class SearchState:
    """Best known costs, predecessors and open/closed sets for one run."""

    def __init__(self, start: Coord) -> None:
        self.start: Coord = start
        self.g_score: Dict[Coord, float] = {start: 0}
        self.came_from: Dict[Coord, Coord] = {}
        self.open: Set[Coord] = {start}
        self.closed: Set[Coord] = set()

    def g(self, cell: Coord) -> float:
        """Return the best known cost to ``cell`` (infinity when unknown)."""
        return self.g_score.get(cell, inf)

    def relax(self, cell: Coord, parent: Coord, cost: float) -> bool:
        """Record ``parent`` as predecessor of ``cell`` if ``cost`` improves it."""

        if cost >= self.g(cell):
            return False
        self.g_score[cell] = cost
        self.came_from[cell] = parent
        if cell not in self.closed:
            self.open.add(cell)
        return True

    def close(self, cell: Coord) -> bool:
        """Mark ``cell`` as expanded. Returns ``False`` if it already was."""

        self.open.discard(cell)
        if cell in self.closed:
            return False
        self.closed.add(cell)
        return True

    def is_closed(self, cell: Coord) -> bool:
        return cell in self.closed

    def predecessor(self, cell: Coord) -> Optional[Coord]:
        return self.came_from.get(cell)


__all__ = ["SearchState"]
