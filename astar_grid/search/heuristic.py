"""Distance estimates used to order the A* frontier."""

from __future__ import annotations

from typing import Callable

from ..core.grid import Coord


Heuristic = Callable[[Coord, Coord], float]


def manhattan(a: Coord, b: Coord) -> int:
    """Return the Manhattan distance between ``a`` and ``b``.

    With unit-cost moves restricted to the four cardinal directions this
    never overestimates the remaining cost and satisfies the triangle
    inequality between adjacent cells, so A* returns a shortest path.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = ["Heuristic", "manhattan"]
