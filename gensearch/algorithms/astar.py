# gensearch/algorithms/astar.py
from __future__ import annotations
import math
from typing import Dict, Optional
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.problem import GoalTest, Heuristic, State, Successors, require_hashable


def _h(heuristic: Heuristic, state) -> float:
    val = float(heuristic(state))
    if math.isnan(val) or val < 0:
        raise ValueError(f"heuristic returned {val!r} for state {state!r}; expected a non-negative number")
    return val


def astar(initial: State, goal_test: GoalTest, successors: Successors,
          heuristic: Heuristic) -> Optional[Node]:
    """
    A* with unit step cost: every transition adds 1 to g, the heuristic does
    all the cost shaping. Frontier is ordered by f = g + h, ties by push order.

    `explored` keeps the cheapest g each state has been pushed with; a state
    is pushed again only when a strictly cheaper route shows up. Older entries
    for that state stay in the frontier and may be popped later.

    Optimal when the heuristic is admissible and consistent.
    """
    require_hashable(initial)
    frontier = PriorityQueue(key=lambda n: n.f_cost)
    frontier.push(Node(initial, None, 0.0, _h(heuristic, initial)))
    explored: Dict[State, float] = {initial: 0.0}

    while frontier:
        node = frontier.pop()
        if goal_test(node.state):
            return node

        for child in successors(node.state):
            new_cost = node.cost + 1
            prev = explored.get(child)
            if prev is None or prev > new_cost:
                explored[child] = new_cost
                frontier.push(node.child(child, new_cost, _h(heuristic, child)))

    return None
