"""Renderer for drawing a session's grid to a :class:`Window`."""

from __future__ import annotations

from typing import Any, Optional

from ..core.grid import Coord, Grid, Role
from ..utils import observer
from .window import Window

# Cell colours per role
ROLE_COLOR_MAP = {
    Role.EMPTY: (255, 255, 255),    # White
    Role.START: (255, 165, 0),      # Orange
    Role.END: (64, 224, 208),       # Turquoise
    Role.BARRIER: (0, 0, 0),        # Black
    Role.OPEN: (0, 255, 0),         # Green
    Role.CLOSED: (255, 0, 0),       # Red
    Role.PATH: (128, 0, 128),       # Purple
}
GRID_LINE_COLOR = (128, 128, 128)
OVERLAY_TEXT_COLOR = (0, 0, 128)


class Renderer:
    """Draw every cell as a filled square sized to fit the window."""

    def __init__(self, window: Window | None = None, *, draw_grid_lines: bool = True) -> None:
        self.window = window if window is not None else Window()
        self.draw_grid_lines = draw_grid_lines

    def cell_size(self, grid: Grid) -> float:
        width, height = self.window.size
        return min(width / grid.cols, height / grid.rows)

    def screen_to_cell(self, grid: Grid, screen_pos: tuple[int, int]) -> Optional[Coord]:
        """Convert a pixel position to ``(row, col)``; ``None`` outside the grid."""

        size = self.cell_size(grid)
        x, y = screen_pos
        if x < 0 or y < 0:
            return None
        coord = (int(y // size), int(x // size))
        return coord if grid.in_bounds(coord) else None

    def _render_cells(self, grid: Grid) -> None:
        size = self.cell_size(grid)
        side = max(1, int(round(size)))
        for cell in grid.iter_cells():
            colour = ROLE_COLOR_MAP[cell.role]
            self.window.draw_rect(int(cell.col * size), int(cell.row * size), side, side, colour)

    def _render_grid_lines(self, grid: Grid) -> None:
        size = self.cell_size(grid)
        right = int(grid.cols * size)
        bottom = int(grid.rows * size)
        for r in range(grid.rows + 1):
            y = int(r * size)
            self.window.draw_line((0, y), (right, y), GRID_LINE_COLOR)
        for c in range(grid.cols + 1):
            x = int(c * size)
            self.window.draw_line((x, 0), (x, bottom), GRID_LINE_COLOR)

    def update(self, session: Any) -> None:
        grid = session.grid
        self._render_cells(grid)
        if self.draw_grid_lines:
            self._render_grid_lines(grid)

        self.window.draw_text(session.status_text(), 5, 5, OVERLAY_TEXT_COLOR)
        if getattr(session, "fps_enabled", False):
            fps = observer.average_fps()
            fps_text = "FPS: --" if fps is None else f"{fps:.1f} FPS"
            self.window.draw_text(fps_text, 5, 25, OVERLAY_TEXT_COLOR)


__all__ = ["Renderer", "ROLE_COLOR_MAP"]
