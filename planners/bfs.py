#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search over a maze grid (unweighted shortest hops).
- 4-connected: neighbors are tried in the order up, left, right, down.
- Distance counts cells on the path, so the start cell alone has distance 1.
- Every visited cell gets exactly one SearchNode; all nodes of a run live in
  one NodeArena and the path is read back through predecessor links.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
import time
import numpy as np

from envs.grid import MazeGrid
from .frontier import FrontierQueue
from .nodes import NodeArena

Cell = Tuple[int, int]

# up, left, right, down
DELTAS_4 = np.array([(-1, 0), (0, -1), (0, 1), (1, 0)], dtype=np.int8)


@dataclass(frozen=True)
class NoSolution:
    """Goal unreachable, or start/goal blocked or out of range."""
    distance: int = 0
    path: Optional[List[Cell]] = None

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Found:
    distance: int
    path: Optional[List[Cell]] = None

    def __bool__(self) -> bool:
        return True


PathResult = Union[NoSolution, Found]


def corner_endpoints(grid: MazeGrid) -> Tuple[Cell, Cell]:
    """Top-left and bottom-right cells, the default search endpoints."""
    return (0, 0), (grid.rows - 1, grid.columns - 1)


def shortest_path(grid: MazeGrid, start: Cell, goal: Cell,
                  want_path: bool = False, annotate: bool = False) -> PathResult:
    return BFSPlanner().search(grid, start, goal, want_path=want_path, annotate=annotate)


class BFSPlanner:
    def __init__(self, connectivity: int = 4):
        # diagonal moves are not part of the maze model
        assert connectivity == 4
        self.conn = connectivity
        self.deltas = DELTAS_4
        self.execution_time = 0.0
        self.nodes_created = 0

    def search(self, grid: MazeGrid, start: Cell, goal: Cell,
               want_path: bool = False, annotate: bool = False) -> PathResult:
        """
        Run one BFS from `start` to `goal`.

        want_path : also return the start->goal cell list.
        annotate  : mark that path on `grid` (implies want_path).
        """
        start_time = time.time()
        self.nodes_created = 0
        sr, sc = int(start[0]), int(start[1])
        gr, gc = int(goal[0]), int(goal[1])

        if not grid.is_open(sr, sc) or not grid.is_open(gr, gc):
            self.execution_time = time.time() - start_time
            return NoSolution()

        visited = np.zeros(grid.shape, dtype=bool)
        arena = NodeArena()
        frontier = FrontierQueue()

        visited[sr, sc] = True
        frontier.enqueue(arena.create(sr, sc, 1))

        goal_index = None
        while not frontier.is_empty():
            index = frontier.dequeue()
            current = arena[index]
            if current.row == gr and current.column == gc:
                goal_index = index
                break
            for dr, dc in self.deltas:
                nr, nc = current.row + int(dr), current.column + int(dc)
                if not grid.is_open(nr, nc) or visited[nr, nc]:
                    continue
                visited[nr, nc] = True
                frontier.enqueue(arena.create(nr, nc, current.distance + 1, index))

        self.nodes_created = len(arena)
        if goal_index is None:
            arena.clear()
            self.execution_time = time.time() - start_time
            return NoSolution()

        distance = arena[goal_index].distance
        path = None
        if want_path or annotate:
            path = arena.path_to(goal_index)
            if annotate:
                for r, c in path:
                    grid.mark_path(r, c)
        arena.clear()
        self.execution_time = time.time() - start_time
        return Found(distance=distance, path=path)

    def plan(self, grid: MazeGrid, start: Cell, goal: Cell) -> Dict:
        res = self.search(grid, start, goal, want_path=True)
        return {'success': bool(res), 'path': res.path, 'distance': res.distance}
