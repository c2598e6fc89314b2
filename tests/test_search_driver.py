import pytest

from astar_grid.core.errors import ContractViolation, GridBusyError
from astar_grid.core.events import CellEvent, NoPathFound, PathFound
from astar_grid.core.grid import Grid, Role
from astar_grid.search.driver import SearchDriver, SearchStatus, find_path, run_search


def test_adjacent_start_and_goal_event_sequence(open_grid):
    events = list(run_search(open_grid))
    assert events == [
        CellEvent((1, 1), Role.CLOSED),
        CellEvent((0, 1), Role.OPEN),
        CellEvent((2, 1), Role.OPEN),
        CellEvent((1, 0), Role.OPEN),
        CellEvent((1, 2), Role.OPEN),
        CellEvent((1, 1), Role.PATH),
        CellEvent((1, 2), Role.PATH),
        PathFound(((1, 1), (1, 2))),
    ]
    assert events[-1].length == 1


def test_status_transitions_and_grid_lock(wall_grid):
    driver = SearchDriver(wall_grid)
    assert driver.status is SearchStatus.READY
    assert not wall_grid.locked

    driver.step()
    assert driver.status is SearchStatus.RUNNING
    assert wall_grid.locked
    with pytest.raises(GridBusyError):
        wall_grid.set_role((1, 1), Role.BARRIER)

    list(driver.events())
    assert driver.status is SearchStatus.SUCCEEDED
    assert not wall_grid.locked
    assert driver.state is None
    assert driver.step() == []


def test_run_search_is_lazy(wall_grid):
    stream = run_search(wall_grid)
    assert not wall_grid.locked
    next(stream)
    assert wall_grid.locked
    rest = list(stream)
    assert isinstance(rest[-1], PathFound)
    assert not wall_grid.locked


def test_stream_ends_with_single_terminal_marker(wall_grid):
    events = list(run_search(wall_grid))
    markers = [e for e in events if isinstance(e, (PathFound, NoPathFound))]
    assert markers == [events[-1]]


def test_exhausted_search_reports_no_path():
    g = Grid.from_lines([
        "S.#..",
        "..#..",
        "..#.E",
    ])
    driver = SearchDriver(g)
    events = list(driver.events())
    assert events[-1] == NoPathFound()
    assert driver.status is SearchStatus.EXHAUSTED
    assert driver.path is None
    assert not any(isinstance(e, PathFound) for e in events)
    assert not any(isinstance(e, CellEvent) and e.new_role is Role.PATH for e in events)
    assert not g.locked


def test_cancel_discards_state_and_releases_grid(wall_grid):
    driver = SearchDriver(wall_grid)
    stream = driver.events()
    next(stream)
    driver.cancel()
    assert driver.status is SearchStatus.CANCELLED
    assert driver.state is None
    assert not wall_grid.locked
    assert list(stream) == []
    with pytest.raises(ContractViolation):
        driver.reconstruct_path()
    wall_grid.reset_all()


def test_cancel_before_start_leaves_grid_untouched(wall_grid):
    driver = SearchDriver(wall_grid)
    driver.cancel()
    assert driver.status is SearchStatus.CANCELLED
    assert not wall_grid.locked
    assert driver.step() == []


def test_reconstruct_before_success_is_contract_violation(wall_grid):
    driver = SearchDriver(wall_grid)
    with pytest.raises(ContractViolation):
        driver.reconstruct_path()
    driver.step()
    with pytest.raises(ContractViolation):
        driver.reconstruct_path()
    list(driver.events())
    assert driver.reconstruct_path() == driver.path


def test_missing_start_or_goal_is_contract_violation():
    g = Grid(3, 3)
    with pytest.raises(ContractViolation):
        SearchDriver(g)
    g.set_role((0, 0), Role.START)
    with pytest.raises(ContractViolation):
        SearchDriver(g)


def test_barrier_endpoint_is_contract_violation():
    g = Grid.from_lines(["S#E"])
    with pytest.raises(ContractViolation):
        SearchDriver(g, goal=(0, 1))


def test_explicit_start_and_goal_override_grid_markers():
    g = Grid(3, 3)
    assert find_path(g, (0, 0), (0, 2)) == [(0, 0), (0, 1), (0, 2)]


def test_start_equals_goal():
    g = Grid(2, 2)
    events = list(run_search(g, (1, 1), (1, 1)))
    assert events == [CellEvent((1, 1), Role.PATH), PathFound(((1, 1),))]


def test_grid_residue_after_success(wall_grid):
    path = find_path(wall_grid)
    lines = wall_grid.to_lines()
    assert wall_grid.role(path[0]) is Role.START
    assert wall_grid.role(path[-1]) is Role.END
    for cell in path[1:-1]:
        assert wall_grid.role(cell) is Role.PATH
    assert any("x" in line for line in lines)


def test_rerun_clears_previous_marks_and_repeats(wall_grid):
    first = list(run_search(wall_grid))
    after_first = wall_grid.to_lines()
    second = list(run_search(wall_grid))
    assert first == second
    assert wall_grid.to_lines() == after_first


def test_expansions_match_closed_events(wall_grid):
    driver = SearchDriver(wall_grid)
    events = list(driver.events())
    closed = [e for e in events if isinstance(e, CellEvent) and e.new_role is Role.CLOSED]
    assert driver.expansions == len(closed)


def test_open_events_are_not_repeated(wall_grid):
    events = list(run_search(wall_grid))
    opened = [e.cell for e in events if isinstance(e, CellEvent) and e.new_role is Role.OPEN]
    assert len(opened) == len(set(opened))


def test_closing_stream_early_releases_grid(wall_grid):
    stream = run_search(wall_grid)
    next(stream)
    assert wall_grid.locked
    stream.close()
    assert not wall_grid.locked
    wall_grid.reset_all()
    assert isinstance(list(run_search(wall_grid))[-1], PathFound)


def test_failing_heuristic_releases_grid(wall_grid):
    def broken(cell, goal):
        if cell == (1, 0):
            raise ValueError("no estimate")
        return 0

    driver = SearchDriver(wall_grid, heuristic=broken)
    with pytest.raises(ValueError):
        list(driver.events())
    assert driver.status is SearchStatus.CANCELLED
    assert not wall_grid.locked


def test_stale_frontier_entry_is_discarded():
    # (0, 2) is queued via the long way round, then reached again more
    # cheaply through (0, 1). The goal is walled off so every entry pops.
    g = Grid.from_lines([
        "S..#E",
        ".#.#.",
        "...#.",
    ])
    weights = {(0, 1): 50, (0, 2): 100}

    def skewed(cell, goal):
        return weights.get(cell, 0)

    driver = SearchDriver(g, heuristic=skewed)
    events = list(driver.events())

    assert events == [
        CellEvent((0, 0), Role.CLOSED),
        CellEvent((1, 0), Role.OPEN),
        CellEvent((0, 1), Role.OPEN),
        CellEvent((1, 0), Role.CLOSED),
        CellEvent((2, 0), Role.OPEN),
        CellEvent((2, 0), Role.CLOSED),
        CellEvent((2, 1), Role.OPEN),
        CellEvent((2, 1), Role.CLOSED),
        CellEvent((2, 2), Role.OPEN),
        CellEvent((2, 2), Role.CLOSED),
        CellEvent((1, 2), Role.OPEN),
        CellEvent((1, 2), Role.CLOSED),
        CellEvent((0, 2), Role.OPEN),
        CellEvent((0, 1), Role.CLOSED),
        CellEvent((0, 2), Role.CLOSED),
        NoPathFound(),
    ]
    # Eight distinct cells plus the reopened (1, 2); the outdated (0, 2)
    # entry is popped last and skipped.
    assert driver.expansions == 9
    assert driver.status is SearchStatus.EXHAUSTED
    assert not g.locked
