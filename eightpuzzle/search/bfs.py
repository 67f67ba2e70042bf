from __future__ import annotations
from collections import deque
from time import perf_counter
from typing import Dict, List, Optional, Tuple

from eightpuzzle.domains.puzzle8 import Board, GOAL, Move, successors, validate_board
from eightpuzzle.search.a_star import SearchResult, SearchStatus, Step

def bfs(start: Board, goal: Board = GOAL, max_expansions: Optional[int] = None) -> SearchResult:
    """Uninformed breadth-first baseline; its step count is the true optimum."""
    start = validate_board(start)
    goal = validate_board(goal)
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Board, Optional[Tuple[Board, Move]]] = {start: None}
    expanded = generated = 0
    peak = 1
    status = SearchStatus.EXHAUSTED
    found = False
    while q:
        peak = max(peak, len(q))
        s = q.popleft()
        if s == goal:
            found = True
            break
        if max_expansions is not None and expanded >= max_expansions:
            status = SearchStatus.LIMIT_REACHED
            break
        expanded += 1
        for m, s2 in successors(s):
            generated += 1
            if s2 in parent: continue
            parent[s2] = (s, m); q.append(s2)

    res = SearchResult(status=status, expanded=expanded, generated=generated,
                       peak_open=peak, peak_closed=len(parent), algorithm="BFS")
    if found:
        # reconstruct
        path: List[Step] = []
        cur: Optional[Board] = goal
        while cur is not None:
            link = parent[cur]
            if link is None:
                path.append(Step(Move.START, cur)); cur = None
            else:
                path.append(Step(link[1], cur)); cur = link[0]
        path.reverse()
        res.status = SearchStatus.SUCCEEDED
        res.path = path
        res.steps = len(path) - 1
    res.time_sec = perf_counter() - t0
    return res
