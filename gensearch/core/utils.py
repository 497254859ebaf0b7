# gensearch/core/utils.py
# This code provides a utility function for reconstructing the solution path from a goal node in a search tree.
from __future__ import annotations
from typing import List
from .node import Node


def reconstruct_path(node: Node) -> List:
    states = []
    cur = node
    while cur is not None:
        states.append(cur.state)
        cur = cur.parent
    states.reverse()
    return states
