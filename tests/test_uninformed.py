from collections import Counter

import pytest

from gensearch import bfs, dfs, reconstruct_path
from gensearch.problems.missionaries import MissionariesProblem

from graph_helpers import assert_valid_path, brute_force_distances, random_graph

DRIVERS = [dfs, bfs]


@pytest.mark.parametrize("driver", DRIVERS)
def test_initial_state_already_goal(driver):
    node = driver("s", lambda s: s == "s", lambda s: ["t"])
    assert node is not None
    assert reconstruct_path(node) == ["s"]


@pytest.mark.parametrize("driver", DRIVERS)
def test_unreachable_goal_returns_none(driver):
    graph = {0: [1], 1: [2, 0], 2: [1], 3: []}
    assert driver(0, lambda s: s == 3, graph.__getitem__) is None


@pytest.mark.parametrize("driver", DRIVERS)
def test_unhashable_initial_state_fails_fast(driver):
    with pytest.raises(TypeError, match="not hashable"):
        driver([0, 0], lambda s: False, lambda s: [])


@pytest.mark.parametrize("driver", DRIVERS)
def test_each_state_expanded_at_most_once(driver):
    graph = random_graph(11, n=20, max_out=4)
    calls = Counter()

    def successors(s):
        calls[s] += 1
        return graph[s]

    driver(0, lambda s: False, successors)
    assert calls, "root was never expanded"
    assert max(calls.values()) == 1
    assert set(calls) == set(brute_force_distances(graph, 0))


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("driver", DRIVERS)
def test_finite_space_finds_goal_iff_reachable(driver, seed):
    graph = random_graph(seed)
    goals = {seed % 14, (seed * 5 + 3) % 14} - {0}
    goal_test = lambda s: s in goals
    reachable = brute_force_distances(graph, 0)
    node = driver(0, goal_test, graph.__getitem__)
    if goals & reachable.keys():
        assert node is not None
        assert_valid_path(reconstruct_path(node), graph.__getitem__, 0, goal_test)
    else:
        assert node is None


@pytest.mark.parametrize("seed", range(12))
def test_bfs_path_is_shortest(seed):
    graph = random_graph(seed, n=16, max_out=3)
    goals = {(seed * 7 + 5) % 16} - {0}
    dist = brute_force_distances(graph, 0)
    node = bfs(0, lambda s: s in goals, graph.__getitem__)
    best = min((dist[g] for g in goals if g in dist), default=None)
    if best is None:
        assert node is None
    else:
        assert len(reconstruct_path(node)) - 1 == best


def test_open_grid_3x3(open_grid_3x3):
    maze = open_grid_3x3
    b = reconstruct_path(bfs(maze.start, maze.goal_test, maze.successors))
    assert len(b) - 1 == 4
    assert_valid_path(b, maze.successors, (0, 0), maze.goal_test)

    d = reconstruct_path(dfs(maze.start, maze.goal_test, maze.successors))
    assert len(d) - 1 >= 4
    assert_valid_path(d, maze.successors, (0, 0), maze.goal_test)


def test_missionaries_bfs_takes_eleven_crossings():
    p = MissionariesProblem()
    node = bfs(p.initial_state(), p.is_goal, p.successors)
    path = reconstruct_path(node)
    assert len(path) - 1 == 11
    assert_valid_path(path, p.successors, p.initial_state(), p.is_goal)
    assert all(s.is_legal() for s in path)
