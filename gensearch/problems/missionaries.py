# gensearch/problems/missionaries.py
# Missionaries and cannibals: ferry everyone from the west bank to the east bank
# without missionaries ever being outnumbered on either bank.
from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import List

from ..algorithms import bfs
from ..core.utils import reconstruct_path

MAX_NUM = 3


@dataclass(frozen=True)
class MCState:
    wm: int            # west bank missionaries
    wc: int            # west bank cannibals
    boat: bool         # True if boat is on the west bank
    max_num: int = MAX_NUM

    @property
    def em(self) -> int: return self.max_num - self.wm

    @property
    def ec(self) -> int: return self.max_num - self.wc

    def is_legal(self) -> bool:
        if 0 < self.wm < self.wc:
            return False
        if 0 < self.em < self.ec:
            return False
        return True

    def goal_test(self) -> bool:
        return self.is_legal() and self.em == self.max_num and self.ec == self.max_num

    def successors(self) -> List["MCState"]:
        # boat carries one or two people; sign moves them toward the other bank
        if self.boat:
            sign, m_here, c_here = -1, self.wm, self.wc
        else:
            sign, m_here, c_here = 1, self.em, self.ec
        sucs = []
        for dm, dc in ((2, 0), (1, 0), (0, 2), (0, 1), (1, 1)):
            if dm <= m_here and dc <= c_here:
                sucs.append(MCState(self.wm + sign * dm, self.wc + sign * dc, not self.boat, self.max_num))
        return [s for s in sucs if s.is_legal()]

    def __str__(self) -> str:
        return (
            f"On the west bank there are {self.wm} missionaries and {self.wc} cannibals.\n"
            f"On the east bank there are {self.em} missionaries and {self.ec} cannibals.\n"
            f"The boat is on the {'west' if self.boat else 'east'} bank."
        )


class MissionariesProblem:
    """Problem-protocol wrapper; heuristic counts people still to ferry, halved (boat holds two)."""
    def __init__(self, max_num: int = MAX_NUM):
        if max_num < 1:
            raise ValueError(f"need at least one missionary and one cannibal, got {max_num}")
        self.max_num = max_num

    def initial_state(self) -> MCState:
        return MCState(self.max_num, self.max_num, True, self.max_num)

    def is_goal(self, s: MCState) -> bool:
        return s.goal_test()

    def successors(self, s: MCState) -> List[MCState]:
        return s.successors()

    def heuristic(self, s: MCState) -> float:
        return (s.wm + s.wc) / 2.0


def describe_solution(path: List[MCState]) -> List[str]:
    if not path:
        return []
    lines = [str(path[0])]
    old = path[0]
    for cur in path[1:]:
        if cur.boat:
            lines.append(f"{old.em - cur.em} missionaries and {old.ec - cur.ec} cannibals "
                         "moved from the east bank to the west bank.")
        else:
            lines.append(f"{old.wm - cur.wm} missionaries and {old.wc - cur.wc} cannibals "
                         "moved from the west bank to the east bank.")
        lines.append(str(cur))
        old = cur
    return lines


def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve missionaries and cannibals with BFS.")
    ap.add_argument("--num", type=int, default=MAX_NUM, help="missionaries (and cannibals) per side")
    args = ap.parse_args(argv)

    problem = MissionariesProblem(args.num)
    solution = bfs(problem.initial_state(), problem.is_goal, problem.successors)
    if solution is None:
        print("No solution found!")
        return
    for line in describe_solution(reconstruct_path(solution)):
        print(line)


if __name__ == "__main__":
    main()
