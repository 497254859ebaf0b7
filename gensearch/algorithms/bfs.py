from __future__ import annotations
from typing import Optional
from ..core.frontiers import FIFOQueue, Frontier
from ..core.node import Node
from ..core.problem import GoalTest, State, Successors, require_hashable


def bfs(initial: State, goal_test: GoalTest, successors: Successors) -> Optional[Node]:
    """
    Breadth-first search. With every transition counted as one step, the
    returned Node sits at the smallest depth any goal state can be reached at.
    """
    require_hashable(initial)
    frontier: Frontier = FIFOQueue()
    frontier.push(Node(initial))
    explored = {initial}

    while frontier:
        node = frontier.pop()
        if goal_test(node.state):
            return node
        for child in successors(node.state):
            if child not in explored:
                explored.add(child)
                frontier.push(node.child(child))

    return None
