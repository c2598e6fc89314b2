"""Event dataclasses produced by a search run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .grid import Coord, Role


@dataclass(frozen=True, slots=True)
class CellEvent:
    """Record that ``cell`` took on ``new_role`` during a search."""

    cell: Coord
    new_role: Role


@dataclass(frozen=True, slots=True)
class PathFound:
    """Terminal marker carrying the path from start to goal, both inclusive."""

    ordered_cells: Tuple[Coord, ...]

    @property
    def length(self) -> int:
        """Number of moves along the path."""
        return len(self.ordered_cells) - 1


@dataclass(frozen=True, slots=True)
class NoPathFound:
    """Terminal marker for an exhausted frontier."""


SearchEvent = Union[CellEvent, PathFound, NoPathFound]


__all__ = ["CellEvent", "NoPathFound", "PathFound", "SearchEvent"]
