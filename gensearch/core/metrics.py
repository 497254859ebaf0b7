# gensearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional
import time, tracemalloc

from .problem import Successors


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    @property
    def steps(self) -> int:
        """Number of transitions in the path (0 when nothing was found)."""
        return max(len(self.path) - 1, 0)


class MeasuredRun:
    """
    Wall time and tracemalloc peak for one search call.
    .elapsed and .peak_kb can be read during the block or after it.
    """
    def __init__(self) -> None:
        self.started: Optional[float] = None
        self.stopped: Optional[float] = None
        self._peak_bytes: int = 0
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        # an outer tracer keeps running; only stop what we started
        self._owns_trace = not tracemalloc.is_tracing()
        if self._owns_trace:
            tracemalloc.start()
        self.started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.stopped = time.perf_counter()
        self._peak_bytes = max(self._peak_bytes, tracemalloc.get_traced_memory()[1])
        if self._owns_trace:
            tracemalloc.stop()
            self._owns_trace = False
        return False  # exceptions from the search propagate

    @property
    def running(self) -> bool:
        return self.started is not None and self.stopped is None

    @property
    def elapsed(self) -> float:
        if self.started is None:
            return 0.0
        end = self.stopped if self.stopped is not None else time.perf_counter()
        return end - self.started

    @property
    def peak_kb(self) -> int:
        peak = self._peak_bytes
        if self.running:
            peak = max(peak, tracemalloc.get_traced_memory()[1])
        return peak // 1024


@dataclass
class CountingSuccessors:
    """Wraps a successor function; every call is one node expansion."""
    fn: Successors
    calls: int = field(default=0, init=False)

    def __call__(self, s):
        self.calls += 1
        return self.fn(s)
