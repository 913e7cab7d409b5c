# -*- coding: utf-8 -*-
"""
Planners on maze grids with a unified API:
planner.plan(grid: MazeGrid, start: (r,c), goal: (r,c))
  -> {'success': bool, 'path': List[(r,c)] or None, 'distance': int}
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .bfs import (BFSPlanner, Found, NoSolution, PathResult,
                  corner_endpoints, shortest_path)
from .frontier import EmptyQueueError, FrontierQueue
from .nodes import NodeArena, SearchNode

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bfs": BFSPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of the keys of PLANNERS (currently only 'bfs').
    kwargs : dict
        Passed to the planner constructor.
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "BFSPlanner",
    "Found",
    "NoSolution",
    "PathResult",
    "corner_endpoints",
    "shortest_path",
    "EmptyQueueError",
    "FrontierQueue",
    "NodeArena",
    "SearchNode",
    "PLANNERS",
    "get_planner",
]
