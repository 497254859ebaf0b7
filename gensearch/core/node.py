# gensearch/core/node.py
# This code defines the Node record the search drivers build while exploring a state space.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, eq=False)
class Node:
    """
    One discovered state plus how we got there.

    - state: caller-defined value (hashable)
    - parent: the Node this one was generated from, None for the root
    - cost: accumulated path cost from the root
    - heuristic: estimated remaining cost (informed search only)

    Nodes compare by identity; two Nodes holding the same state are still
    different discoveries.
    """
    state: Any
    parent: Optional["Node"] = field(default=None, repr=False)
    cost: float = 0.0
    heuristic: float = 0.0

    @property
    def f_cost(self) -> float:
        return self.cost + self.heuristic

    @property
    def depth(self) -> int:
        d, cur = 0, self.parent
        while cur is not None:
            d += 1
            cur = cur.parent
        return d

    def child(self, state, cost: float = 0.0, heuristic: float = 0.0) -> "Node":
        return Node(state=state, parent=self, cost=float(cost), heuristic=float(heuristic))
