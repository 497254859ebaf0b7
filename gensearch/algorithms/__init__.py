"""Search drivers: depth-first, breadth-first and A*."""

from .dfs import dfs
from .bfs import bfs
from .astar import astar
from .solve import ALGORITHMS, solve

__all__ = ["dfs", "bfs", "astar", "solve", "ALGORITHMS"]
