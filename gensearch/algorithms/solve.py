# gensearch/algorithms/solve.py
# Runs one of the drivers against a Problem object and packages the outcome as a SearchResult.
from __future__ import annotations
from typing import Callable, Optional
from .astar import astar
from .bfs import bfs
from .dfs import dfs
from ..core.metrics import CountingSuccessors, MeasuredRun, SearchResult
from ..core.problem import Heuristic, Problem
from ..core.utils import reconstruct_path

ALGORITHMS = ("dfs", "bfs", "astar")
_NAMES = {"dfs": "DFS", "bfs": "BFS", "astar": "A*"}


def _heuristic_from_problem(problem) -> Heuristic:
    h: Optional[Callable] = getattr(problem, "heuristic", None)
    if h is None:
        return lambda s: 0.0
    return h


def solve(problem: Problem, algorithm: str = "bfs") -> SearchResult:
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {algorithm!r}; choose one of {', '.join(ALGORITHMS)}")
    name = _NAMES[algorithm]
    successors = CountingSuccessors(problem.successors)
    initial = problem.initial_state()

    with MeasuredRun() as meter:
        if algorithm == "dfs":
            node = dfs(initial, problem.is_goal, successors)
        elif algorithm == "bfs":
            node = bfs(initial, problem.is_goal, successors)
        else:
            node = astar(initial, problem.is_goal, successors, _heuristic_from_problem(problem))

    if node is None:
        return SearchResult(name, False, [], float("inf"), successors.calls, meter.elapsed, meter.peak_kb)
    path = reconstruct_path(node)
    return SearchResult(name, True, path, float(len(path) - 1), successors.calls, meter.elapsed, meter.peak_kb)
