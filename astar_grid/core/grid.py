"""Fixed-size cell grid with role tags and on-demand 4-neighbour adjacency."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import ContractViolation, GridBusyError


Coord = Tuple[int, int]  # (row, col)

# up, down, left, right
MOVES: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Role(Enum):
    """Mutually exclusive tag carried by every cell."""

    EMPTY = "empty"
    START = "start"
    END = "end"
    BARRIER = "barrier"
    OPEN = "open"
    CLOSED = "closed"
    PATH = "path"


SEARCH_ROLES = frozenset({Role.OPEN, Role.CLOSED, Role.PATH})

_GLYPHS = {
    Role.EMPTY: ".",
    Role.START: "S",
    Role.END: "E",
    Role.BARRIER: "#",
    Role.OPEN: "o",
    Role.CLOSED: "x",
    Role.PATH: "*",
}
_ROLE_FOR_GLYPH = {glyph: role for role, glyph in _GLYPHS.items()}


def glyph_for(role: Role) -> str:
    """Return the single character used for ``role`` in ASCII layouts."""

    return _GLYPHS[role]


@dataclass(slots=True)
class Cell:
    """A single grid square."""

    row: int
    col: int
    role: Role = Role.EMPTY

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


class Grid:
    """Row-major container of ``rows x cols`` cells.

    Dimensions are fixed at construction. At most one cell holds
    :attr:`Role.START` and at most one holds :attr:`Role.END`. Adjacency is
    never cached; :meth:`neighbors` reads the current barrier state.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ContractViolation(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows: int = rows
        self.cols: int = cols
        self._cells: List[List[Cell]] = [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]
        self._start: Optional[Coord] = None
        self._end: Optional[Coord] = None
        self._locked: bool = False

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from an ASCII layout.

        ``.`` is empty, ``#`` a barrier, ``S`` the start and ``E`` the end.
        All lines must have the same width.
        """

        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ContractViolation("Layout has no rows")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ContractViolation("Layout rows have different widths")

        grid = cls(len(rows), width)
        for r, row in enumerate(rows):
            for c, glyph in enumerate(row):
                role = _ROLE_FOR_GLYPH.get(glyph)
                if role is None:
                    raise ContractViolation(f"Unknown layout glyph {glyph!r} at {(r, c)}")
                if role is not Role.EMPTY:
                    grid.set_role((r, c), role)
        return grid

    def to_lines(self) -> List[str]:
        """Return the grid as ASCII rows (inverse of :meth:`from_lines`)."""

        return ["".join(_GLYPHS[cell.role] for cell in row) for row in self._cells]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def start(self) -> Optional[Coord]:
        return self._start

    @property
    def end(self) -> Optional[Coord]:
        return self._end

    @property
    def locked(self) -> bool:
        """``True`` while a search owns the grid."""
        return self._locked

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, coord: Coord) -> Cell:
        self._check_bounds(coord)
        row, col = coord
        return self._cells[row][col]

    def role(self, coord: Coord) -> Role:
        return self.cell(coord).role

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in self._cells:
            yield from row

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Return traversable neighbours of ``coord`` in up, down, left, right order."""

        self._check_bounds(coord)
        row, col = coord
        out: List[Coord] = []
        for dr, dc in MOVES:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                if self._cells[nr][nc].role is not Role.BARRIER:
                    out.append((nr, nc))
        return out

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def set_role(self, coord: Coord, role: Role) -> None:
        """Overwrite the role of ``coord``.

        Placing START or END moves the marker: the previous holder is reset
        to EMPTY first.
        """

        self._check_editable()
        cell = self.cell(coord)

        if role is Role.START and self._start is not None and self._start != coord:
            self.cell(self._start).role = Role.EMPTY
        elif role is Role.END and self._end is not None and self._end != coord:
            self.cell(self._end).role = Role.EMPTY

        if self._start == coord and role is not Role.START:
            self._start = None
        if self._end == coord and role is not Role.END:
            self._end = None

        cell.role = role
        if role is Role.START:
            self._start = coord
        elif role is Role.END:
            self._end = coord

    def reset_all(self) -> None:
        """Set every cell to EMPTY and forget the start and end markers."""

        self._check_editable()
        for cell in self.iter_cells():
            cell.role = Role.EMPTY
        self._start = None
        self._end = None

    def clear_search_marks(self) -> None:
        """Turn OPEN, CLOSED and PATH cells back into EMPTY ones."""

        for cell in self.iter_cells():
            if cell.role in SEARCH_ROLES:
                cell.role = Role.EMPTY

    def mark(self, coord: Coord, role: Role) -> None:
        """Paint a search role onto ``coord``; START and END keep their role."""

        if role not in SEARCH_ROLES:
            raise ContractViolation(f"mark() only accepts search roles, got {role}")
        cell = self.cell(coord)
        if cell.role in (Role.START, Role.END):
            return
        cell.role = role

    # ------------------------------------------------------------------
    # Search ownership
    # ------------------------------------------------------------------
    def lock(self) -> None:
        if self._locked:
            raise GridBusyError("A search is already running on this grid")
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _check_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise ContractViolation(
                f"Coordinate {coord} outside grid of {self.rows}x{self.cols}"
            )

    def _check_editable(self) -> None:
        if self._locked:
            raise GridBusyError("Grid cannot be edited while a search is running")

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, end={self._end})"


__all__ = ["Cell", "Coord", "Grid", "MOVES", "Role", "SEARCH_ROLES", "glyph_for"]
