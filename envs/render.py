#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bordered ASCII rendering of a MazeGrid.

    |-------|
      . . # |
    | # . # |
    | . . .
    |-------|

The gap on the left of the first row is the entrance, the gap on the right of
the last row is the exit.
"""

from __future__ import annotations
from typing import Optional, TextIO
import sys

from .grid import CellState, MazeGrid

GLYPHS = {
    CellState.OPEN: ".",
    CellState.BLOCKED: "#",
    CellState.PATH: "+",
}


def _border(columns: int) -> str:
    return "|-" + "--" * columns + "|"


def format_maze(grid: MazeGrid) -> str:
    rows, columns = grid.rows, grid.columns
    if rows == 0 or columns == 0:
        return ""
    lines = [_border(columns)]
    for r in range(rows):
        body = "".join(" " + GLYPHS[grid.state(r, c)] for c in range(columns))
        left = " " if r == 0 else "|"
        right = " " if r == rows - 1 else " |"
        lines.append(left + body + right)
    lines.append(_border(columns))
    return "\n".join(lines) + "\n"


def pretty_print(grid: MazeGrid, output: Optional[TextIO] = None) -> None:
    (output or sys.stdout).write(format_maze(grid))


def format_distance(distance: int) -> str:
    if distance == 0:
        return "No solution."
    return f"Solution in {distance} steps."
