#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
parser.py
---------
Text maze format -> MazeGrid.

One maze row per line; ASCII digits are cells ('0' open, any other digit
blocked), everything else is ignored. The first row fixes the column count.
"""

from __future__ import annotations

import io
import warnings
from typing import List, TextIO, Union

import numpy as np

from .grid import CellState, MazeGrid

ASCII_DIGITS = "0123456789"


def _row_digits(line: str) -> List[str]:
    return [ch for ch in line if ch in ASCII_DIGITS]


def parse_maze(source: Union[str, TextIO]) -> MazeGrid:
    """
    Parse a maze from a string or a text stream.

    - Lines with no digits are skipped.
    - Rows longer than the first row are truncated.
    - Shorter rows are padded with BLOCKED cells (with a UserWarning).
    """
    if isinstance(source, str):
        source = io.StringIO(source)

    rows: List[List[int]] = []
    columns = 0
    for lineno, line in enumerate(source, start=1):
        digits = _row_digits(line)
        if not digits:
            continue
        if not rows:
            columns = len(digits)
        if len(digits) < columns:
            warnings.warn(
                f"line {lineno}: expected {columns} cells, got {len(digits)}; "
                f"padding with blocked cells",
                UserWarning,
            )
            digits = digits + ["1"] * (columns - len(digits))
        rows.append([CellState.OPEN if d == "0" else CellState.BLOCKED
                     for d in digits[:columns]])

    if not rows:
        return MazeGrid(np.zeros((0, 0), dtype=np.int8))
    return MazeGrid.from_rows(rows)


def read_maze(path: str) -> MazeGrid:
    with open(path, "r") as fh:
        return parse_maze(fh)
