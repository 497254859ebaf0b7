# gensearch/problems/maze.py
# Grid maze with randomly blocked cells, solved with DFS, BFS and A*.
from __future__ import annotations
import argparse
import math
from enum import Enum
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from ..algorithms import astar, bfs, dfs
from ..core.utils import reconstruct_path


class Cell(str, Enum):
    EMPTY = " "
    BLOCKED = "X"
    START = "S"
    GOAL = "G"
    PATH = "*"


class MazeLocation(NamedTuple):
    row: int
    column: int


class Maze:
    """
    rows x columns grid; each cell is blocked with probability `sparseness`.
    Start and goal cells are never blocked.

    - State: MazeLocation(row, column)
    - successors(s): in-bounds, unblocked neighbours in the order down, up, right, left
    - heuristic(s): Manhattan distance to the goal (admissible with 4-neighbour moves)

    Goal defaults to the bottom-right cell. Pass `seed` for a reproducible layout;
    without it each maze is different.
    """
    def __init__(self, rows: int = 10, columns: int = 10, sparseness: float = 0.2,
                 start: Tuple[int, int] = (0, 0), goal: Optional[Tuple[int, int]] = None,
                 seed: Optional[int] = None):
        if rows < 1 or columns < 1:
            raise ValueError(f"maze needs at least one row and column, got {rows}x{columns}")
        if not 0.0 <= sparseness <= 1.0:
            raise ValueError(f"sparseness must be within [0, 1], got {sparseness}")
        self._rows, self._columns = rows, columns
        self._start = MazeLocation(*start)
        self._goal = MazeLocation(*goal) if goal is not None else MazeLocation(rows - 1, columns - 1)
        for name, loc in (("start", self._start), ("goal", self._goal)):
            if not self._in_bounds(loc.row, loc.column):
                raise ValueError(f"{name} {tuple(loc)} is outside a {rows}x{columns} maze")

        rng = np.random.default_rng(seed)
        blocked = rng.random((rows, columns)) < sparseness
        self._grid: List[List[Cell]] = [
            [Cell.BLOCKED if blocked[r, c] else Cell.EMPTY for c in range(columns)]
            for r in range(rows)
        ]
        self._grid[self._start.row][self._start.column] = Cell.START
        self._grid[self._goal.row][self._goal.column] = Cell.GOAL

    @property
    def start(self) -> MazeLocation: return self._start

    @property
    def goal(self) -> MazeLocation: return self._goal

    @property
    def rows(self) -> int: return self._rows

    @property
    def columns(self) -> int: return self._columns

    def cell(self, row: int, column: int) -> Cell:
        return self._grid[row][column]

    def _in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self._rows and 0 <= column < self._columns

    def goal_test(self, ml: MazeLocation) -> bool:
        return ml == self._goal

    def successors(self, ml: MazeLocation) -> List[MazeLocation]:
        locations = []
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            r, c = ml.row + dr, ml.column + dc
            if self._in_bounds(r, c) and self._grid[r][c] is not Cell.BLOCKED:
                locations.append(MazeLocation(r, c))
        return locations

    # Problem protocol
    def initial_state(self) -> MazeLocation:
        return self._start

    def is_goal(self, s: MazeLocation) -> bool:
        return self.goal_test(s)

    def heuristic(self, s: MazeLocation) -> float:
        return manhattan_distance(self._goal)(s)

    def mark(self, path: Iterable[MazeLocation]) -> None:
        for ml in path:
            self._grid[ml.row][ml.column] = Cell.PATH
        self._grid[self._start.row][self._start.column] = Cell.START
        self._grid[self._goal.row][self._goal.column] = Cell.GOAL

    def clear(self, path: Iterable[MazeLocation]) -> None:
        for ml in path:
            self._grid[ml.row][ml.column] = Cell.EMPTY
        self._grid[self._start.row][self._start.column] = Cell.START
        self._grid[self._goal.row][self._goal.column] = Cell.GOAL

    def __str__(self) -> str:
        return "".join("".join(cell.value for cell in row) + "\n" for row in self._grid)


def euclidean_distance(goal: MazeLocation) -> Callable[[MazeLocation], float]:
    def distance(ml: MazeLocation) -> float:
        xdist = ml.column - goal.column
        ydist = ml.row - goal.row
        return math.sqrt(xdist * xdist + ydist * ydist)
    return distance


def manhattan_distance(goal: MazeLocation) -> Callable[[MazeLocation], float]:
    def distance(ml: MazeLocation) -> float:
        return float(abs(ml.column - goal.column) + abs(ml.row - goal.row))
    return distance


def _report(maze: Maze, name: str, node) -> None:
    if node is None:
        print(f"No solution found using {name}!")
        return
    path = reconstruct_path(node)
    maze.mark(path)
    print(f"{name}: {len(path) - 1} steps")
    print(maze)
    maze.clear(path)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve a random maze with DFS, BFS and A*.")
    ap.add_argument("--rows", type=int, default=10)
    ap.add_argument("--cols", type=int, default=10)
    ap.add_argument("--sparseness", type=float, default=0.2, help="probability a cell is blocked")
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args(argv)

    maze = Maze(rows=args.rows, columns=args.cols, sparseness=args.sparseness,
                seed=args.seed)
    print(maze)

    _report(maze, "DFS", dfs(maze.start, maze.goal_test, maze.successors))
    _report(maze, "BFS", bfs(maze.start, maze.goal_test, maze.successors))
    _report(maze, "A*", astar(maze.start, maze.goal_test, maze.successors, manhattan_distance(maze.goal)))


if __name__ == "__main__":
    main()
