#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FIFO frontier for breadth-first search.

Entries are node indices into a NodeArena. The queue does no duplicate
detection; callers track visited cells themselves.
"""

from __future__ import annotations
from collections import deque
from typing import Deque


class EmptyQueueError(IndexError):
    """Raised by FrontierQueue.dequeue() on an empty queue."""


class FrontierQueue:
    def __init__(self):
        self._items: Deque[int] = deque()

    def enqueue(self, node: int) -> None:
        self._items.append(node)

    def dequeue(self) -> int:
        if not self._items:
            raise EmptyQueueError("dequeue from an empty frontier")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
