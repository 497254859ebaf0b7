# gensearch/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE


def _load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m gensearch.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)


def _label(r):
    return f"{r['algo']}\n{r.get('problem', '')}".strip()


def _bar(ax, rows, metric, title, ylabel):
    labels = [_label(r) for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(labels)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=20, ha="right", fontsize=7)

    top = max(vals) if vals else 0
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if isinstance(v, float) and v < 0.01 else (f"{v:.3f}" if isinstance(v, float) else f"{v}")
        ax.text(xi, v + 0.01 * (top or 1), label, ha="center", va="bottom", fontsize=8)


def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Problem | Algorithm | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r.get('problem', '')} | {r['algo']} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def _fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()


def main(results_json: Optional[Path] = None, out_dir: Optional[Path] = None):
    results_json = Path(results_json) if results_json is not None else RESULTS_JSON
    out_dir = Path(out_dir) if out_dir is not None else OUT_DIR
    rows = _load_rows(results_json)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    print(f"Wrote {md_path}")

    charts = [
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
        ("cost", "Path Cost (lower is better)", "steps", "cost.png"),
    ]
    written = [md_path]
    for metric, title, ylabel, fname in charts:
        fig, ax = plt.subplots(figsize=(7, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / fname
        path.write_bytes(_fig_to_png_bytes(fig))
        print(f"Wrote {path}")
        written.append(path)
    return written


if __name__ == "__main__":
    main()
