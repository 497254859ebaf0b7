import importlib
import json
import math
import tracemalloc

import matplotlib
import pytest

from gensearch import ALGORITHMS, solve
from gensearch.benchmarks import plot_results, run_all
from gensearch.core.metrics import CountingSuccessors, MeasuredRun
from gensearch.problems.maze import Maze
from gensearch.problems.missionaries import MissionariesProblem


class BrokenProblem:
    def initial_state(self): return 0
    def is_goal(self, s): return False
    def successors(self, s): raise RuntimeError("boom")


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_solve_open_grid(algo, open_grid_3x3):
    r = solve(open_grid_3x3, algo)
    assert r.success
    assert r.path[0] == (0, 0) and r.path[-1] == (2, 2)
    assert r.cost == r.steps
    assert r.nodes_expanded >= r.steps
    if algo != "dfs":
        assert r.steps == 4


def test_solve_no_solution():
    r = solve(MissionariesProblem(4), "bfs")
    assert not r.success
    assert r.path == [] and r.steps == 0
    assert math.isinf(r.cost)


def test_solve_unknown_algorithm():
    with pytest.raises(ValueError, match="unknown algorithm"):
        solve(MissionariesProblem(), "ids")


def test_solve_without_heuristic_uses_zero():
    class Line:
        def initial_state(self): return 0
        def is_goal(self, s): return s == 3
        def successors(self, s): return [s + 1]

    assert solve(Line(), "astar").path == [0, 1, 2, 3]


def test_counting_successors():
    c = CountingSuccessors(lambda s: [s])
    c(1); c(2)
    assert c.calls == 2


def test_measured_run_reports_after_exit():
    with MeasuredRun() as meter:
        _ = [0] * 10_000
        assert meter.elapsed >= 0.0
    assert meter.elapsed >= 0.0
    assert meter.peak_kb >= 0


def test_run_rows_per_problem_and_algorithm():
    problems = [("open", Maze(rows=4, columns=4, sparseness=0.0, start=(0, 0), goal=(3, 3))),
                ("missionaries", MissionariesProblem())]
    rows = run_all.run(problems)
    assert len(rows) == len(problems) * len(ALGORITHMS)
    assert all(r["success"] for r in rows)
    assert {r["algo"] for r in rows} == {"DFS", "BFS", "A*"}


def test_run_records_errors():
    rows = run_all.run([("broken", BrokenProblem())])
    assert len(rows) == len(ALGORITHMS)
    assert all(not r["success"] and "boom" in r["error"] for r in rows)


def test_main_and_plot_write_files(tmp_path):
    out = tmp_path / "results.json"
    data = run_all.main(out_path=out)
    assert json.loads(out.read_text())["results"] == data["results"]

    written = plot_results.main(results_json=out, out_dir=tmp_path)
    names = sorted(p.name for p in written)
    assert names == ["cost.png", "nodes_expanded.png", "results.md", "time.png"]
    assert (tmp_path / "results.md").read_text().startswith("| Problem | Algorithm |")


def test_plot_requires_results(tmp_path):
    with pytest.raises(SystemExit):
        plot_results.main(results_json=tmp_path / "missing.json", out_dir=tmp_path)


def test_measured_run_leaves_outer_tracing_running():
    tracemalloc.start()
    try:
        with MeasuredRun() as meter:
            _ = [0] * 10_000
        assert tracemalloc.is_tracing(), "outer tracemalloc session was stopped"
        assert meter.peak_kb >= 0
    finally:
        tracemalloc.stop()
    with MeasuredRun():
        pass
    assert not tracemalloc.is_tracing()


def test_importing_plot_results_keeps_backend():
    before = matplotlib.get_backend()
    matplotlib.use("svg")
    try:
        importlib.reload(plot_results)
        assert matplotlib.get_backend().lower() == "svg"
    finally:
        matplotlib.use(before)
