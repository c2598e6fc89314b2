"""Turn predecessor links into an ordered path."""

from __future__ import annotations

from typing import Dict, List

from ..core.errors import ContractViolation
from ..core.grid import Coord


def reconstruct_path(came_from: Dict[Coord, Coord], start: Coord, goal: Coord) -> List[Coord]:
    """Return ``[start, ..., goal]`` by following ``came_from`` back from ``goal``."""

    path = [goal]
    current = goal
    while current != start:
        if current not in came_from:
            raise ContractViolation(f"No predecessor recorded for {current}")
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


__all__ = ["reconstruct_path"]
