#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Search nodes for one BFS run, stored in a single arena.

Nodes are addressed by their creation index. `predecessor` is the index of the
node that discovered this one (None for the start node), so the links form a
tree rooted at index 0.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class SearchNode:
    row: int
    column: int
    distance: int                  # 1-based: the start node has distance 1
    predecessor: Optional[int] = None

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.row, self.column)


class NodeArena:
    """Growable collection owning every node created during one search."""

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def create(self, row: int, column: int, distance: int,
               predecessor: Optional[int] = None) -> int:
        if predecessor is not None:
            assert 0 <= predecessor < len(self._nodes)
        self._nodes.append(SearchNode(row, column, distance, predecessor))
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def lineage(self, index: int) -> Iterator[SearchNode]:
        """Yield the node at `index`, then each predecessor up to the root."""
        current: Optional[int] = index
        while current is not None:
            node = self._nodes[current]
            yield node
            current = node.predecessor

    def path_to(self, index: int) -> List[Tuple[int, int]]:
        """Cells from the root to the node at `index`, inclusive."""
        path = [node.cell for node in self.lineage(index)]
        path.reverse()
        return path

    def clear(self) -> None:
        self._nodes.clear()
