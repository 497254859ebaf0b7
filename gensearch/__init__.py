"""
gensearch: generic state-space search.

    from gensearch import bfs, reconstruct_path
    node = bfs(start, is_goal, successors)
    if node is not None:
        print(reconstruct_path(node))
"""

from .core import (
    Node, FIFOQueue, LIFOStack, PriorityQueue, Problem, require_hashable,
    reconstruct_path, linear_contains, binary_contains, MeasuredRun, SearchResult,
)
from .algorithms import dfs, bfs, astar, solve, ALGORITHMS

__version__ = "0.1.0"

__all__ = [
    "dfs", "bfs", "astar", "solve", "ALGORITHMS",
    "Node", "FIFOQueue", "LIFOStack", "PriorityQueue", "Problem", "require_hashable",
    "reconstruct_path", "linear_contains", "binary_contains", "MeasuredRun", "SearchResult",
]
