"""Interactive session holding the grid, the active search and pacing."""

from __future__ import annotations

from typing import List, Optional
import logging

from .errors import GridBusyError
from .events import NoPathFound, PathFound, SearchEvent
from .grid import Coord, Grid, Role
from .time_manager import TimeManager
from ..search.driver import SearchDriver

logger = logging.getLogger(__name__)


class Session:
    """Grid plus the editing and search commands bound to mouse and CLI."""

    def __init__(self, grid: Grid, time_manager: TimeManager | None = None) -> None:
        self.grid: Grid = grid
        self.time_manager: TimeManager = time_manager or TimeManager()
        self.search: Optional[SearchDriver] = None
        self.last_result: Optional[SearchEvent] = None

        # For GUI state
        self.gui_enabled: bool = False
        self.fps_enabled: bool = False

    @property
    def searching(self) -> bool:
        return self.search is not None and not self.search.status.terminal

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def paint(self, coord: Coord) -> Optional[Role]:
        """Place START, then END, then barriers, like a left click.

        Returns the role placed, or ``None`` if nothing changed.
        """

        current = self.grid.role(coord)
        if current in (Role.START, Role.END):
            return None
        if self.grid.start is None:
            role = Role.START
        elif self.grid.end is None:
            role = Role.END
        else:
            role = Role.BARRIER
        if not self._edit(coord, role):
            return None
        return role

    def erase(self, coord: Coord) -> bool:
        """Reset ``coord`` to EMPTY, forgetting START/END if it held them."""
        return self._edit(coord, Role.EMPTY)

    def place(self, coord: Coord, role: Role) -> bool:
        """Set an explicit role on ``coord`` (used by the CLI)."""
        return self._edit(coord, role)

    def _edit(self, coord: Coord, role: Role) -> bool:
        try:
            self.grid.set_role(coord, role)
        except GridBusyError:
            logger.warning("Ignoring edit of %s while a search is running.", coord)
            return False
        return True

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------
    def start_search(self) -> bool:
        """Create a driver for the grid's START and END. Returns ``False`` if not possible."""

        if self.searching:
            logger.info("A search is already running.")
            return False
        if self.grid.start is None or self.grid.end is None:
            logger.info("Place a start and an end cell before searching.")
            return False
        self.search = SearchDriver(self.grid)
        self.last_result = None
        return True

    def advance(self) -> List[SearchEvent]:
        """Run one step of the active search and return its events."""

        if not self.searching:
            return []
        assert self.search is not None
        events = self.search.step()
        for event in events:
            if isinstance(event, (PathFound, NoPathFound)):
                self.last_result = event
        return events

    def run_to_completion(self) -> List[SearchEvent]:
        """Drain the active search without pacing."""

        events: List[SearchEvent] = []
        while self.searching:
            events.extend(self.advance())
        return events

    def cancel_search(self) -> None:
        if self.search is not None:
            self.search.cancel()

    def reset(self) -> None:
        """Cancel any search and clear the whole grid."""

        self.cancel_search()
        self.search = None
        self.last_result = None
        self.grid.reset_all()
        logger.info("Grid reset.")

    def status_text(self) -> str:
        """One-line summary of the search for overlays and the CLI."""

        if self.search is None:
            return "Idle"
        text = f"Search {self.search.status.value} - {self.search.expansions} expansions"
        if isinstance(self.last_result, PathFound):
            text += f", path length {self.last_result.length}"
        elif isinstance(self.last_result, NoPathFound):
            text += ", no path"
        return text


__all__ = ["Session"]
