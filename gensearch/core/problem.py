# gensearch/core/problem.py
# Callback contract between client problems and the search drivers.
from __future__ import annotations
from typing import Callable, Hashable, Iterable, Protocol

State = Hashable
GoalTest = Callable[[State], bool]
Successors = Callable[[State], Iterable[State]]
Heuristic = Callable[[State], float]


class Problem(Protocol):
    """
    Optional bundle of the three (or four) callbacks a driver needs.
    The drivers themselves only take plain callables; see algorithms.solve.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def successors(self, s: State) -> Iterable[State]: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> float: return 0.0


def require_hashable(state) -> None:
    """Fail fast when a state can't be used as an explored-registry key."""
    try:
        hash(state)
    except TypeError as e:
        raise TypeError(
            f"state {state!r} of type {type(state).__name__} is not hashable; "
            "search states must support == and hash() (use a tuple or a frozen dataclass)"
        ) from e
