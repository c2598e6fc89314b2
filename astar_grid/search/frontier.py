"""Priority queue of cells waiting to be expanded."""

from __future__ import annotations

from collections import Counter
from heapq import heappop, heappush
from itertools import count
from typing import Iterator, List, NamedTuple

from ..core.errors import ContractViolation
from ..core.grid import Coord


class FrontierEntry(NamedTuple):
    f_score: float
    sequence: int
    cell: Coord


class Frontier:
    """Min-heap keyed on ``(f_score, sequence)``.

    The sequence number grows with every push so equal f-scores pop in
    insertion order. A cell may be queued several times; callers discard
    outdated entries when they pop them.
    """

    def __init__(self) -> None:
        self._heap: List[FrontierEntry] = []
        self._sequence: Iterator[int] = count()
        self._queued: Counter[Coord] = Counter()

    def push(self, cell: Coord, f_score: float) -> None:
        heappush(self._heap, FrontierEntry(f_score, next(self._sequence), cell))
        self._queued[cell] += 1

    def pop_min(self) -> FrontierEntry:
        """Remove and return the entry with the smallest key."""

        if not self._heap:
            raise ContractViolation("pop_min() called on an empty frontier")
        entry = heappop(self._heap)
        self._queued[entry.cell] -= 1
        if self._queued[entry.cell] == 0:
            del self._queued[entry.cell]
        return entry

    def contains(self, cell: Coord) -> bool:
        return cell in self._queued

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["Frontier", "FrontierEntry"]
