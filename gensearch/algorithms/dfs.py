# gensearch/algorithms/dfs.py
# This code implements Depth-First Search (DFS) using a LIFO stack to explore nodes in a search tree.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import Frontier, LIFOStack
from ..core.node import Node
from ..core.problem import GoalTest, State, Successors, require_hashable


def dfs(initial: State, goal_test: GoalTest, successors: Successors) -> Optional[Node]:
    """
    Returns the goal Node (walk it with reconstruct_path) or None when every
    reachable state has been discovered without a goal. The path found is
    whatever the expansion order hits first, not the shortest one.
    """
    require_hashable(initial)
    frontier: Frontier = LIFOStack()
    frontier.push(Node(initial))
    # states are marked when generated, so nothing is pushed twice
    explored = {initial}

    while frontier:
        node = frontier.pop()
        if goal_test(node.state):
            return node
        for child in successors(node.state):
            if child in explored:
                continue
            explored.add(child)
            frontier.push(node.child(child))

    return None
