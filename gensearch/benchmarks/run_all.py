# gensearch/benchmarks/run_all.py
from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..algorithms import ALGORITHMS, solve
from ..problems.maze import Maze
from ..problems.missionaries import MissionariesProblem

# ---- Tunables (overridable via environment variables) -----------------------
MAZE_ROWS       = int(os.getenv("GENSEARCH_MAZE_ROWS", "30"))
MAZE_COLS       = int(os.getenv("GENSEARCH_MAZE_COLS", "30"))
MAZE_SPARSENESS = float(os.getenv("GENSEARCH_MAZE_SPARSENESS", "0.2"))
SEED            = int(os.getenv("GENSEARCH_SEED", "7"))

RESULTS_JSON = Path(__file__).with_name("results.json")


def _fmt_time(x):
    if x is None:
        return "n/a"
    return f"{float(x):.4f}"


def _load_problems() -> List[Tuple[str, Any]]:
    maze = Maze(rows=MAZE_ROWS, columns=MAZE_COLS, sparseness=MAZE_SPARSENESS,
                start=(0, 0), goal=(MAZE_ROWS - 1, MAZE_COLS - 1), seed=SEED)
    return [
        (f"Maze {MAZE_ROWS}x{MAZE_COLS}", maze),
        ("Missionaries", MissionariesProblem()),
    ]


def run(problems: Optional[List[Tuple[str, Any]]] = None) -> List[Dict[str, Any]]:
    """One row per (problem, algorithm). A crashing algorithm becomes a row with `error` set."""
    rows = []
    for pname, problem in (problems if problems is not None else _load_problems()):
        print(f"== {pname}")
        for algo in ALGORITHMS:
            print(f"→ Running {algo} ...")
            try:
                r = solve(problem, algo)
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"steps={r.steps} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
                rows.append({
                    "problem": pname,
                    "algo": r.algo,
                    "success": r.success,
                    "cost": r.cost if r.success else None,
                    "nodes_expanded": r.nodes_expanded,
                    "time_s": r.time_s,
                    "peak_kb": r.peak_kb,
                    "error": r.error,
                })
            except Exception as e:
                print(f"  {algo}: ERROR {repr(e)}")
                rows.append({
                    "problem": pname,
                    "algo": algo,
                    "success": False,
                    "error": repr(e),
                    "nodes_expanded": None,
                    "cost": None,
                    "time_s": None,
                    "peak_kb": None,
                })
    return rows


def main(out_path: Optional[Path] = None) -> Dict[str, Any]:
    rows = run()
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    out_path = Path(out_path) if out_path is not None else RESULTS_JSON
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")
    return out


if __name__ == "__main__":
    main()
