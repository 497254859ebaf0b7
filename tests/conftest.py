import pytest

from gensearch.problems.maze import Maze


@pytest.fixture
def open_grid_3x3():
    return Maze(rows=3, columns=3, sparseness=0.0, start=(0, 0), goal=(2, 2))
