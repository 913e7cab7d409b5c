# -*- coding: utf-8 -*-
"""
Maze grids and their text formats.
Exposes:
- CellState, MazeGrid          (grid.py)
- parse_maze, read_maze        (parser.py)
- format_maze, pretty_print, format_distance  (render.py)
"""

from __future__ import annotations

from .grid import CellState, MazeGrid
from .parser import parse_maze, read_maze
from .render import format_distance, format_maze, pretty_print

__all__ = [
    "CellState",
    "MazeGrid",
    "parse_maze",
    "read_maze",
    "format_maze",
    "pretty_print",
    "format_distance",
]
