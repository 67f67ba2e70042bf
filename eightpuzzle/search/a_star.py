from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional
from time import perf_counter
import logging

from eightpuzzle.domains.puzzle8 import (
    Board,
    GOAL,
    Move,
    fingerprint,
    successors,
    validate_board,
)
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.heuristics.registry import Heuristic
from eightpuzzle.search.closed_set import FingerprintSet
from eightpuzzle.search.open_set import DaryHeap

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    INITIALIZED = "initialized"
    RUNNING = "running"
    SUCCEEDED = "ok"
    EXHAUSTED = "exhausted"
    LIMIT_REACHED = "limit"


class Step(NamedTuple):
    move: Move
    board: Board


@dataclass(frozen=True)
class Node:
    index: int             # position in the search's arena
    board: Board
    parent: Optional[int]  # arena index of the generating node, None for the root
    move: Move
    g: int
    f: int


@dataclass
class SearchConfig:
    arity: int = 4
    open_capacity: int = 1024
    closed_capacity: int = 1000
    max_load: float = 0.7
    max_expansions: Optional[int] = None


@dataclass
class SearchResult:
    status: SearchStatus
    path: Optional[List[Step]] = None
    steps: Optional[int] = None
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    time_sec: float = 0.0
    algorithm: str = "A*"

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED

    def to_dict(self) -> Dict[str, Any]:
        """Flat row in the shape written by the experiment runner."""
        return {
            "algorithm": self.algorithm,
            "g": self.steps,
            "expanded": self.expanded,
            "generated": self.generated,
            "duplicates": self.duplicates,
            "peak_open": self.peak_open,
            "peak_closed": self.peak_closed,
            "time": self.time_sec,
            "termination": self.status.value,
        }


def reconstruct_path(arena: List[Node], node: Node) -> List[Step]:
    """Follow parent indices from `node` back to the root; returns root -> node."""
    path: List[Step] = []
    cur: Optional[Node] = node
    while cur is not None:
        path.append(Step(cur.move, cur.board))
        cur = arena[cur.parent] if cur.parent is not None else None
    path.reverse()
    return path


class AStarSearch:
    """
    One-shot A* over 8-puzzle boards.

    Owns its node arena, open set and closed set; nothing is shared
    between instances. `run()` drives INITIALIZED -> RUNNING -> one of
    SUCCEEDED / EXHAUSTED / LIMIT_REACHED.
    """

    def __init__(
        self,
        start: Board,
        goal: Board = GOAL,
        heuristic: Heuristic = manhattan,
        config: Optional[SearchConfig] = None,
    ):
        self.start = validate_board(start)
        self.goal = validate_board(goal)
        self.heuristic = heuristic
        self.config = config or SearchConfig()
        self.status = SearchStatus.INITIALIZED

        self.arena: List[Node] = []
        self.open_set: DaryHeap[Node] = DaryHeap(arity=self.config.arity,
                                                 capacity=self.config.open_capacity)
        self.closed_set = FingerprintSet(self.config.closed_capacity, self.config.max_load)

        root = self._new_node(self.start, None, Move.START, 0)
        self.open_set.push(root)

    def _h(self, board: Board) -> int:
        return self.heuristic(board, self.goal)

    def _new_node(self, board: Board, parent: Optional[int], move: Move, g: int) -> Node:
        node = Node(index=len(self.arena), board=board, parent=parent,
                    move=move, g=g, f=g + self._h(board))
        self.arena.append(node)
        return node

    def run(self) -> SearchResult:
        if self.status is not SearchStatus.INITIALIZED:
            raise RuntimeError(f"search already ran (status={self.status.name})")
        self.status = SearchStatus.RUNNING
        t0 = perf_counter()
        logger.debug("A* start=%s goal=%s h0=%d", self.start, self.goal, self.arena[0].f)

        open_set, closed = self.open_set, self.closed_set
        goal_key = fingerprint(self.goal)
        max_expansions = self.config.max_expansions
        expanded = generated = duplicates = 0
        peak_open = 1
        goal_node: Optional[Node] = None

        while open_set:
            peak_open = max(peak_open, len(open_set))
            node = open_set.pop_min()
            key = fingerprint(node.board)
            if not closed.add(key):
                # stale copy of an already-settled state
                duplicates += 1
                continue

            if key == goal_key:
                goal_node = node
                self.status = SearchStatus.SUCCEEDED
                break

            if max_expansions is not None and expanded >= max_expansions:
                self.status = SearchStatus.LIMIT_REACHED
                break

            expanded += 1
            for move, s2 in successors(node.board):
                if fingerprint(s2) in closed:
                    continue
                child = self._new_node(s2, node.index, move, node.g + 1)
                open_set.push(child)
                generated += 1
        else:
            self.status = SearchStatus.EXHAUSTED

        result = SearchResult(
            status=self.status,
            expanded=expanded,
            generated=generated,
            duplicates=duplicates,
            peak_open=peak_open,
            peak_closed=len(closed),
            time_sec=perf_counter() - t0,
        )
        if goal_node is not None:
            result.path = reconstruct_path(self.arena, goal_node)
            result.steps = goal_node.g
        logger.info("A* %s: steps=%s expanded=%d generated=%d in %.4fs",
                    self.status.name, result.steps, expanded, generated, result.time_sec)

        # release nodes together once the search concludes
        self.arena = []
        self.open_set = DaryHeap(arity=self.config.arity, capacity=1)
        self.closed_set = FingerprintSet(1, self.config.max_load)
        return result


def a_star(
    start: Board,
    goal: Board = GOAL,
    heuristic: Heuristic = manhattan,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Solve `start` -> `goal` with a fresh AStarSearch."""
    return AStarSearch(start, goal, heuristic, config).run()
