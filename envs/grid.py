#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Maze grid: a fixed-shape 2D store of cell states.

- Cells are OPEN (traversable), BLOCKED, or PATH (written by path annotation).
- Storage is a numpy int8 array of shape (rows, columns).
- The shape is fixed at construction; cells may be re-marked in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence, Tuple

import numpy as np


class CellState(IntEnum):
    OPEN = 0
    BLOCKED = 1
    PATH = 2


_VALID_STATES = np.array([s.value for s in CellState], dtype=np.int8)


@dataclass
class MazeGrid:
    """Rectangular maze; `cells[r, c]` holds a CellState value."""
    cells: np.ndarray   # (rows, columns) int8

    def __post_init__(self):
        cells = np.asarray(self.cells)
        if cells.ndim != 2:
            raise ValueError(f"Maze cells must be 2D, got shape {cells.shape}")
        cells = cells.astype(np.int8, copy=True)
        if cells.size and not np.isin(cells, _VALID_STATES).all():
            raise ValueError("Maze cells contain values outside CellState")
        self.cells = cells

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "MazeGrid":
        rows = [list(r) for r in rows]
        if not rows:
            return cls(np.zeros((0, 0), dtype=np.int8))
        return cls(np.array(rows, dtype=np.int8))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def rows(self) -> int:
        return self.cells.shape[0]

    @property
    def columns(self) -> int:
        return self.cells.shape[1]

    def in_bounds(self, row: int, col: int) -> bool:
        return (0 <= row < self.rows) and (0 <= col < self.columns)

    def is_open(self, row: int, col: int) -> bool:
        # neighbor expansion probes outside the grid; that is not an error
        if not self.in_bounds(row, col):
            return False
        return int(self.cells[row, col]) == CellState.OPEN

    def mark_path(self, row: int, col: int) -> None:
        self.cells[row, col] = CellState.PATH

    def state(self, row: int, col: int) -> CellState:
        return CellState(int(self.cells[row, col]))

    def open_mask(self) -> np.ndarray:
        """Boolean (rows, columns) array, True where the cell is not BLOCKED."""
        return self.cells != CellState.BLOCKED

    def copy(self) -> "MazeGrid":
        return MazeGrid(self.cells.copy())
