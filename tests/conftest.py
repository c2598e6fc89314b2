# tests/conftest.py
from collections import deque
from typing import Callable, Optional

import pytest

from astar_grid.core.grid import Coord, Grid


def bfs_distance(grid: Grid, start: Coord, goal: Coord) -> Optional[int]:
    """Shortest 4-directional move count, independent of the A* code."""
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        cell, dist = queue.popleft()
        if cell == goal:
            return dist
        for nxt in grid.neighbors(cell):
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, dist + 1))
    return None


@pytest.fixture
def bfs() -> Callable[[Grid, Coord, Coord], Optional[int]]:
    return bfs_distance


@pytest.fixture
def wall_grid() -> Grid:
    """5x5 grid with a wall in column 2 leaving only (4, 2) open."""
    return Grid.from_lines([
        "S.#..",
        "..#..",
        "..#..",
        "..#..",
        "....E",
    ])


@pytest.fixture
def open_grid() -> Grid:
    return Grid.from_lines([
        "...",
        ".SE",
        "...",
    ])
