# gensearch/core/frontiers.py
# Frontier containers: the pop order is what separates DFS, BFS and A*.
from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Any, Callable, Protocol


class Frontier(Protocol):
    def push(self, node: Any) -> None: ...
    def pop(self) -> Any: ...
    def peek(self) -> Any: ...
    def __len__(self) -> int: ...


class LIFOStack:
    """Depth-first order: last pushed, first popped."""
    def __init__(self):
        self._items = []
    def push(self, node): self._items.append(node)
    def pop(self): return self._items.pop()
    def peek(self): return self._items[-1]
    def __len__(self): return len(self._items)


class FIFOQueue:
    """Breadth-first order: first pushed, first popped."""
    def __init__(self):
        self._items = deque()
    def push(self, node): self._items.append(node)
    def pop(self): return self._items.popleft()
    def peek(self): return self._items[0]
    def __len__(self): return len(self._items)


class PriorityQueue:
    """
    Smallest key(node) first. Entries with equal keys come out in the order
    they went in, so the nodes themselves are never compared.
    """
    def __init__(self, key: Callable[[Any], float]):
        self.key = key
        self._heap = []
        self._seq = itertools.count()

    def push(self, node):
        heapq.heappush(self._heap, (self.key(node), next(self._seq), node))

    def pop(self):
        return heapq.heappop(self._heap)[-1]

    def peek(self):
        return self._heap[0][-1]

    def __len__(self): return len(self._heap)
