"""Step-wise A* search over a :class:`~astar_grid.core.grid.Grid`.

A :class:`SearchDriver` performs one frontier expansion per :meth:`step` so
a presentation layer can pause between steps and draw the cells that
changed. :func:`run_search` wraps a driver in a lazy event stream.

States::

    READY -> RUNNING -> SUCCEEDED | EXHAUSTED
                     -> CANCELLED (via cancel())
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional
import logging

from ..core.errors import ContractViolation
from ..core.events import CellEvent, NoPathFound, PathFound, SearchEvent
from ..core.grid import Coord, Grid, Role
from .frontier import Frontier
from .heuristic import Heuristic, manhattan
from .path import reconstruct_path
from .state import SearchState

logger = logging.getLogger(__name__)

# Every move between adjacent cells costs the same.
STEP_COST = 1


class SearchStatus(Enum):
    READY = "ready"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self in (SearchStatus.SUCCEEDED, SearchStatus.EXHAUSTED, SearchStatus.CANCELLED)


class SearchDriver:
    """Run A* from ``start`` to ``goal`` one expansion at a time.

    ``start`` and ``goal`` default to the grid's START and END cells. The
    grid is locked against edits from the first :meth:`step` until the
    search reaches a terminal state or is cancelled.
    """

    def __init__(
        self,
        grid: Grid,
        start: Optional[Coord] = None,
        goal: Optional[Coord] = None,
        heuristic: Heuristic = manhattan,
    ) -> None:
        start = grid.start if start is None else start
        goal = grid.end if goal is None else goal
        if start is None:
            raise ContractViolation("Cannot search without a start cell")
        if goal is None:
            raise ContractViolation("Cannot search without a goal cell")
        for label, coord in (("start", start), ("goal", goal)):
            if grid.role(coord) is Role.BARRIER:
                raise ContractViolation(f"The {label} cell {coord} is a barrier")

        self.grid = grid
        self.start: Coord = start
        self.goal: Coord = goal
        self.heuristic = heuristic
        self.status = SearchStatus.READY
        self.expansions: int = 0

        self._state: Optional[SearchState] = SearchState(start)
        self._frontier = Frontier()
        self._frontier.push(start, heuristic(start, goal))
        self._path: Optional[List[Coord]] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def path(self) -> Optional[List[Coord]]:
        """The reconstructed path once the search has succeeded."""
        return self._path

    @property
    def state(self) -> Optional[SearchState]:
        return self._state

    def step(self) -> List[SearchEvent]:
        """Advance the search by one expansion and return the events it produced."""

        if self.status.terminal:
            return []
        if self.status is SearchStatus.READY:
            self._begin()

        state = self._state
        assert state is not None

        current = self._pop_current(state)
        if current is None:
            return self._finish_exhausted()
        if current == self.goal:
            return self._finish_succeeded()

        events: List[SearchEvent] = []
        self.expansions += 1
        if state.close(current):
            events.append(self._emit(current, Role.CLOSED))

        g_current = state.g(current)
        for neighbor in self.grid.neighbors(current):
            tentative_g = g_current + STEP_COST
            if tentative_g >= state.g(neighbor):
                continue
            newly_open = neighbor not in state.open and not state.is_closed(neighbor)
            state.relax(neighbor, current, tentative_g)
            self._frontier.push(neighbor, tentative_g + self.heuristic(neighbor, self.goal))
            if newly_open:
                events.append(self._emit(neighbor, Role.OPEN))

        logger.debug(
            "Expanded %s (g=%s); frontier size %d",
            current,
            g_current,
            len(self._frontier),
        )
        return events

    def events(self) -> Iterator[SearchEvent]:
        """Yield every event until the search reaches a terminal state.

        Closing the generator early, or an exception raised by a step,
        cancels the search so the grid is not left locked.
        """

        try:
            while not self.status.terminal:
                for event in self.step():
                    if self.status is SearchStatus.CANCELLED:
                        return
                    yield event
        finally:
            if not self.status.terminal:
                self.cancel()

    def cancel(self) -> None:
        """Abort the search, dropping its bookkeeping and releasing the grid."""

        if self.status.terminal:
            return
        was_running = self.status is SearchStatus.RUNNING
        self.status = SearchStatus.CANCELLED
        self._state = None
        if was_running:
            self.grid.unlock()
        logger.info("Search %s -> %s cancelled after %d expansions", self.start, self.goal, self.expansions)

    def reconstruct_path(self) -> List[Coord]:
        if self.status is not SearchStatus.SUCCEEDED:
            raise ContractViolation(f"No path to reconstruct while search is {self.status.value}")
        if self._path is not None:
            return list(self._path)
        assert self._state is not None
        return reconstruct_path(self._state.came_from, self.start, self.goal)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _begin(self) -> None:
        self.grid.lock()
        self.grid.clear_search_marks()
        self.status = SearchStatus.RUNNING
        logger.info("Search started %s -> %s on %dx%d grid", self.start, self.goal, self.grid.rows, self.grid.cols)

    def _pop_current(self, state: SearchState) -> Optional[Coord]:
        """Pop the best live frontier cell, skipping stale duplicates."""

        while self._frontier:
            entry = self._frontier.pop_min()
            expected = state.g(entry.cell) + self.heuristic(entry.cell, self.goal)
            if entry.f_score != expected:
                continue
            return entry.cell
        return None

    def _emit(self, cell: Coord, role: Role) -> CellEvent:
        self.grid.mark(cell, role)
        return CellEvent(cell, role)

    def _finish_succeeded(self) -> List[SearchEvent]:
        self.status = SearchStatus.SUCCEEDED
        path = self.reconstruct_path()
        self._path = path
        events: List[SearchEvent] = [self._emit(cell, Role.PATH) for cell in path]
        events.append(PathFound(tuple(path)))
        self._release()
        logger.info(
            "Search succeeded: path of %d steps after %d expansions",
            len(path) - 1,
            self.expansions,
        )
        return events

    def _finish_exhausted(self) -> List[SearchEvent]:
        self.status = SearchStatus.EXHAUSTED
        self._release()
        logger.info("Search exhausted: no path from %s to %s after %d expansions", self.start, self.goal, self.expansions)
        return [NoPathFound()]

    def _release(self) -> None:
        self._state = None
        self.grid.unlock()


def run_search(
    grid: Grid,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
    heuristic: Heuristic = manhattan,
) -> Iterator[SearchEvent]:
    """Return the lazy event stream of a new search on ``grid``.

    The stream ends with either :class:`PathFound` or :class:`NoPathFound`.
    """

    return SearchDriver(grid, start, goal, heuristic).events()


def find_path(
    grid: Grid,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
    heuristic: Heuristic = manhattan,
) -> Optional[List[Coord]]:
    """Run a search to completion and return its path, or ``None``."""

    for event in run_search(grid, start, goal, heuristic):
        if isinstance(event, PathFound):
            return list(event.ordered_cells)
    return None


__all__ = ["STEP_COST", "SearchDriver", "SearchStatus", "find_path", "run_search"]
