#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

from envs.grid import CellState, MazeGrid
from planners import PLANNERS, get_planner
from planners.bfs import BFSPlanner, Found, NoSolution, corner_endpoints, shortest_path

SCENARIO = [
    [0, 0, 1],
    [1, 0, 1],
    [0, 0, 0],
]


def brute_force_distance(grid: MazeGrid, start, goal):
    """Fewest cells on any simple 4-connected open path, or None."""
    if not grid.is_open(*start) or not grid.is_open(*goal):
        return None
    best = [None]
    seen = {start}

    def dfs(cell, length):
        if best[0] is not None and length >= best[0]:
            return
        if cell == goal:
            best[0] = length
            return
        r, c = cell
        for nxt in [(r-1, c), (r, c-1), (r, c+1), (r+1, c)]:
            if nxt not in seen and grid.is_open(*nxt):
                seen.add(nxt)
                dfs(nxt, length + 1)
                seen.discard(nxt)

    dfs(start, 1)
    return best[0]


def random_grid(rng, H, W, density=0.3) -> MazeGrid:
    return MazeGrid((rng.random((H, W)) < density).astype(np.int8))


def assert_valid_path(grid: MazeGrid, path, start, goal, distance):
    assert path[0] == tuple(start)
    assert path[-1] == tuple(goal)
    assert len(path) == distance
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        assert abs(r0 - r1) + abs(c0 - c1) == 1
    assert all(grid.is_open(r, c) for r, c in path)


def test_distance_matches_brute_force_on_small_grids():
    rng = np.random.default_rng(0)
    for _ in range(150):
        H, W = int(rng.integers(1, 5)), int(rng.integers(1, 5))
        grid = random_grid(rng, H, W)
        start = (int(rng.integers(0, H)), int(rng.integers(0, W)))
        goal = (int(rng.integers(0, H)), int(rng.integers(0, W)))
        expected = brute_force_distance(grid, start, goal)
        res = shortest_path(grid, start, goal, want_path=True)
        if expected is None:
            assert isinstance(res, NoSolution)
            assert res.distance == 0
        else:
            assert isinstance(res, Found)
            assert res.distance == expected
            assert_valid_path(grid, res.path, start, goal, res.distance)


def test_repeat_search_is_idempotent():
    rng = np.random.default_rng(5)
    grid = random_grid(rng, 12, 12, density=0.25)
    start, goal = corner_endpoints(grid)
    before = grid.cells.copy()
    a = shortest_path(grid, start, goal)
    b = shortest_path(grid, start, goal)
    assert a.distance == b.distance
    assert a.path is None and b.path is None
    assert np.array_equal(grid.cells, before)


def test_single_cell_grid():
    grid = MazeGrid.from_rows([[0]])
    res = shortest_path(grid, (0, 0), (0, 0), want_path=True)
    assert res == Found(distance=1, path=[(0, 0)])


def test_start_equals_goal_inside_larger_grid():
    grid = MazeGrid.from_rows(SCENARIO)
    res = shortest_path(grid, (1, 1), (1, 1), want_path=True)
    assert res.distance == 1 and res.path == [(1, 1)]


def test_blocked_start_is_no_solution():
    grid = MazeGrid.from_rows([[1, 0], [0, 0]])
    planner = BFSPlanner()
    res = planner.search(grid, (0, 0), (1, 1))
    assert not res
    assert res.distance == 0
    assert planner.nodes_created == 0


def test_out_of_range_endpoints_are_no_solution():
    grid = MazeGrid.from_rows(SCENARIO)
    assert isinstance(shortest_path(grid, (0, 0), (3, 3)), NoSolution)
    assert isinstance(shortest_path(grid, (-1, 0), (2, 2)), NoSolution)


def test_zero_sized_grid_is_no_solution():
    grid = MazeGrid.from_rows([])
    start, goal = corner_endpoints(grid)
    assert isinstance(shortest_path(grid, start, goal, want_path=True), NoSolution)


def test_scenario_three_by_three():
    grid = MazeGrid.from_rows(SCENARIO)
    res = shortest_path(grid, (0, 0), (2, 2), want_path=True)
    assert res.distance == 5
    assert res.path == [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)]


def test_scenario_blocked_goal():
    grid = MazeGrid.from_rows(SCENARIO)
    assert isinstance(shortest_path(grid, (0, 0), (1, 0), want_path=True), NoSolution)


def test_disconnected_goal():
    grid = MazeGrid.from_rows([
        [0, 1, 0],
        [0, 1, 0],
        [0, 1, 0],
    ])
    planner = BFSPlanner()
    res = planner.search(grid, (0, 0), (2, 2))
    assert isinstance(res, NoSolution)
    assert planner.nodes_created == 3


def test_tie_break_is_deterministic():
    grid = MazeGrid.from_rows([[0, 0], [0, 0]])
    paths = {tuple(shortest_path(grid, (0, 0), (1, 1), want_path=True).path) for _ in range(5)}
    assert paths == {((0, 0), (0, 1), (1, 1))}
    assert shortest_path(grid, (0, 0), (1, 1)).distance == 3


def test_annotate_marks_only_path_cells():
    grid = MazeGrid.from_rows(SCENARIO)
    res = shortest_path(grid, (0, 0), (2, 2), annotate=True)
    assert res.path == [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)]
    marked = {tuple(rc) for rc in np.argwhere(grid.cells == CellState.PATH).tolist()}
    assert marked == set(res.path)
    assert grid.state(2, 0) == CellState.OPEN
    assert grid.state(1, 0) == CellState.BLOCKED


def test_nodes_bounded_by_grid_size():
    grid = MazeGrid(np.zeros((15, 20), dtype=np.int8))
    planner = BFSPlanner()
    res = planner.search(grid, (0, 0), (14, 19))
    assert res.distance == 15 + 20 - 1
    assert planner.nodes_created <= grid.rows * grid.columns


def test_plan_matches_unified_planner_api():
    grid = MazeGrid.from_rows(SCENARIO)
    planner = get_planner("BFS")
    assert "bfs" in PLANNERS
    out = planner.plan(grid, (0, 0), (2, 2))
    assert out["success"] and out["distance"] == 5 and len(out["path"]) == 5
    out = planner.plan(grid, (0, 0), (1, 0))
    assert out == {"success": False, "path": None, "distance": 0}


def test_arena_released_after_search(monkeypatch):
    import planners.bfs as bfs_mod
    arenas = []
    real_arena = bfs_mod.NodeArena

    def tracking_arena():
        arena = real_arena()
        arenas.append(arena)
        return arena

    monkeypatch.setattr(bfs_mod, "NodeArena", tracking_arena)
    grid = MazeGrid.from_rows(SCENARIO)
    planner = BFSPlanner()
    assert planner.search(grid, (0, 0), (2, 2), want_path=True).distance == 5
    walled = MazeGrid.from_rows([[0, 1, 0]])
    assert isinstance(planner.search(walled, (0, 0), (0, 2)), NoSolution)
    assert planner.nodes_created > 0
    assert [len(a) for a in arenas] == [0, 0]
