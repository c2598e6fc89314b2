"""ASCII terminal renderer for search grids."""

from __future__ import annotations

import sys
from typing import TextIO

from ...core.grid import Grid, Role, glyph_for


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_ROLE_COLOURS = {
    Role.EMPTY: "white",
    Role.START: "yellow",
    Role.END: "cyan",
    Role.BARRIER: "black",
    Role.OPEN: "green",
    Role.CLOSED: "red",
    Role.PATH: "magenta",
}


class TerminalView:
    """Minimal grid viewer using ANSI colours."""

    def __init__(self, width: int = 80, height: int = 40, *, colour: bool = True) -> None:
        self.width = width
        self.height = height
        self.colour = colour
        self.enabled: bool = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled afterwards."""

        self.enabled = not self.enabled
        return self.enabled

    def render_lines(self, grid: Grid) -> list[str]:
        """Return the top-left ``width x height`` window of ``grid`` as text rows."""

        lines: list[str] = []
        for r in range(min(grid.rows, self.height)):
            row: list[str] = []
            for c in range(min(grid.cols, self.width)):
                role = grid.role((r, c))
                glyph = glyph_for(role)
                if self.colour:
                    glyph = f"{_COLOURS[_ROLE_COLOURS[role]]}{glyph}"
                row.append(glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return lines

    def render(self, grid: Grid, stream: TextIO | None = None) -> None:
        """Draw ``grid`` to ``stream`` (``stdout`` by default) when enabled."""

        if not self.enabled:
            return
        out = stream if stream is not None else sys.stdout
        if self.colour:
            out.write("\x1b[H\x1b[2J")  # clear screen
        out.write("\n".join(self.render_lines(grid)) + "\n")
        out.flush()


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
