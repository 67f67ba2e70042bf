from __future__ import annotations
from functools import lru_cache
from typing import Tuple

from eightpuzzle.domains.puzzle8 import Board, GOAL, ROW

GoalPositions = Tuple[Tuple[int, int], ...]  # indexed by tile value

@lru_cache(maxsize=32)
def goal_positions(goal: Board = GOAL) -> GoalPositions:
    """(row, col) of every tile in `goal`, derived from the board itself."""
    pos = [(0, 0)] * len(goal)
    for idx, tile in enumerate(goal):
        pos[tile] = divmod(idx, ROW)
    return tuple(pos)

def manhattan(s: Board, goal: Board = GOAL) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    pos = goal_positions(goal)
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, ROW)
        gr, gc = pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
