from .node import Node
from .frontiers import FIFOQueue, Frontier, LIFOStack, PriorityQueue
from .problem import Problem, require_hashable
from .utils import reconstruct_path
from .containment import linear_contains, binary_contains
from .metrics import MeasuredRun, SearchResult

__all__ = [
    "Node", "Frontier", "FIFOQueue", "LIFOStack", "PriorityQueue", "Problem", "require_hashable",
    "reconstruct_path", "linear_contains", "binary_contains", "MeasuredRun", "SearchResult",
]
