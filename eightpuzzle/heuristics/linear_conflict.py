from __future__ import annotations
from typing import List

from eightpuzzle.domains.puzzle8 import Board, GOAL, ROW
from eightpuzzle.heuristics.manhattan import goal_positions, manhattan

def _line_penalty(targets: List[int]) -> int:
    """2 * (tiles that must leave the line) = 2 * (n - longest increasing run of goal coords)."""
    n = len(targets)
    if n < 2:
        return 0
    best = [1] * n
    for i in range(n):
        for j in range(i):
            if targets[j] < targets[i] and best[j] + 1 > best[i]:
                best[i] = best[j] + 1
    return 2 * (n - max(best))

def linear_conflict(s: Board, goal: Board = GOAL) -> int:
    """Manhattan + linear-conflict penalty over rows and columns."""
    pos = goal_positions(goal)
    m = manhattan(s, goal)
    # Row conflicts: tiles sitting in their goal row, compared by goal column
    for r in range(ROW):
        row = s[ROW*r:ROW*r+ROW]
        m += _line_penalty([pos[t][1] for t in row if t != 0 and pos[t][0] == r])
    # Column conflicts
    for c in range(ROW):
        col = [s[c + ROW*r] for r in range(ROW)]
        m += _line_penalty([pos[t][0] for t in col if t != 0 and pos[t][1] == c])
    return m
