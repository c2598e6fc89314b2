from astar_grid.gui.renderer import ROLE_COLOR_MAP, Renderer
from astar_grid.gui.window import Window
from astar_grid.core.grid import Grid, Role
from astar_grid.core.session import Session
from astar_grid.utils import observer


class DummyWindow(Window):
    def __init__(self, size=(90, 60)) -> None:
        self.size = size
        self.rects = []
        self.lines = []
        self.text = []

    def draw_rect(self, x, y, width, height, colour) -> None:
        self.rects.append((x, y, width, height, colour))

    def draw_line(self, start, end, colour) -> None:
        self.lines.append((start, end))

    def draw_text(self, text: str, x: int, y: int, colour=(255, 255, 255)) -> None:
        self.text.append(text)

    def refresh(self) -> None:  # pragma: no cover - not used
        pass


def _make_session() -> Session:
    return Session(Grid.from_lines(["S.#", "..E"]))


def test_renderer_draws_every_cell_in_role_colour():
    window = DummyWindow()
    renderer = Renderer(window)
    renderer.update(_make_session())
    assert len(window.rects) == 6
    assert window.rects[0] == (0, 0, 30, 30, ROLE_COLOR_MAP[Role.START])
    assert window.rects[2] == (60, 0, 30, 30, ROLE_COLOR_MAP[Role.BARRIER])
    assert window.rects[5] == (60, 30, 30, 30, ROLE_COLOR_MAP[Role.END])
    # 3 horizontal + 4 vertical lines
    assert len(window.lines) == 7
    assert window.text == ["Idle"]


def test_renderer_cell_size_fits_smaller_side():
    renderer = Renderer(DummyWindow((90, 60)))
    grid = Grid(2, 3)
    assert renderer.cell_size(grid) == 30
    assert renderer.screen_to_cell(grid, (65, 35)) == (1, 2)
    assert renderer.screen_to_cell(grid, (95, 10)) is None
    assert renderer.screen_to_cell(grid, (-1, 10)) is None


def test_overlay_drawn_when_fps_enabled():
    window = DummyWindow()
    renderer = Renderer(window, draw_grid_lines=False)
    session = _make_session()
    session.fps_enabled = True
    observer._tick_durations.clear()
    renderer.update(session)
    assert window.text == ["Idle", "FPS: --"]
    assert window.lines == []


def test_search_result_shown_without_fps_overlay():
    window = DummyWindow()
    renderer = Renderer(window, draw_grid_lines=False)
    session = _make_session()
    session.start_search()
    session.run_to_completion()
    renderer.update(session)
    assert len(window.text) == 1
    assert window.text[0].startswith("Search succeeded")
    assert window.text[0].endswith("path length 3")
