from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Optional, Tuple
import random

Board = Tuple[int, ...]  # 9-length tuple, 0 is blank
GOAL: Board = (1,2,3,4,5,6,7,8,0)
SIZE = 9
ROW = 3


class InvalidBoardError(ValueError):
    """Raised when a board is not a permutation of 0..8."""


class Move(Enum):
    """Direction the blank travels. START marks the root of a search."""
    START = "Start"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


_OFFSETS = {
    Move.UP: -ROW,
    Move.DOWN: ROW,
    Move.LEFT: -1,
    Move.RIGHT: 1,
}

# Precomputed legal blank moves per blank index, in UP, DOWN, LEFT, RIGHT order
_LEGAL = {}
for _i in range(SIZE):
    _r, _c = divmod(_i, ROW)
    _moves = []
    if _r > 0:       _moves.append(Move.UP)
    if _r < ROW - 1: _moves.append(Move.DOWN)
    if _c > 0:       _moves.append(Move.LEFT)
    if _c < ROW - 1: _moves.append(Move.RIGHT)
    _LEGAL[_i] = tuple(_moves)

# ---------------- Input ----------------

def validate_board(board: Iterable[int]) -> Board:
    """Return `board` as a tuple, raising InvalidBoardError unless it is a permutation of 0..8."""
    s = tuple(board)
    if len(s) != SIZE:
        raise InvalidBoardError(f"board must have {SIZE} tiles, got {len(s)}")
    if 0 not in s:
        raise InvalidBoardError("board has no blank tile (0)")
    if sorted(s) != list(range(SIZE)):
        raise InvalidBoardError(f"board must contain each of 0..{SIZE - 1} exactly once: {s}")
    return s

def parse_board(text: str) -> Board:
    """Read the first 9 decimal digits of `text` row-major; every other character is ignored."""
    digits = [int(ch) for ch in text if ch in "0123456789"]
    if len(digits) < SIZE:
        raise InvalidBoardError(f"expected at least {SIZE} digits, found {len(digits)}")
    return validate_board(digits[:SIZE])

# ---------------- Core dynamics ----------------

def legal_moves(s: Board) -> List[Move]:
    return list(_LEGAL[s.index(0)])

def apply_move(s: Board, move: Move) -> Optional[Board]:
    """Slide the blank one cell in `move`'s direction. Returns None if that leaves the grid."""
    z = s.index(0)
    if move not in _LEGAL[z]:
        return None
    j = z + _OFFSETS[move]
    lst = list(s)
    lst[z], lst[j] = lst[j], lst[z]
    return tuple(lst)

def successors(s: Board) -> List[Tuple[Move, Board]]:
    """Return (move, next_board) for every legal blank move."""
    z = s.index(0)
    out: List[Tuple[Move, Board]] = []
    for m in _LEGAL[z]:
        j = z + _OFFSETS[m]
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        out.append((m, tuple(lst)))
    return out

def fingerprint(s: Board) -> int:
    """Positional base-10 encoding of the board. Only injective while every tile is a single digit."""
    key = 0
    for i, tile in enumerate(s):
        key += tile * 10 ** i
    return key

# ---------------- Solvability / instances ----------------

def _inversions(s: Board) -> int:
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv

def is_solvable(s: Board, goal: Board = GOAL) -> bool:
    """On an odd-width board, reachable iff the inversion parities of s and goal agree."""
    return (_inversions(s) % 2) == (_inversions(goal) % 2)

def scramble(depth: int, seed: int) -> Board:
    """Scramble GOAL by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = GOAL
    last_blank = None
    for _ in range(depth):
        z = s.index(0)
        cand = [z + _OFFSETS[m] for m in _LEGAL[z]]
        if last_blank in cand and len(cand) > 1:
            cand.remove(last_blank)
        j = rng.choice(cand)
        lst = list(s)
        lst[z], lst[j] = lst[j], lst[z]
        last_blank = z
        s = tuple(lst)
    return s

def make_unsolvable(s: Board) -> Board:
    """Swap the first two non-blank tiles, flipping permutation parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)

def format_board(s: Board) -> str:
    """ASCII rendering, blank drawn as a space."""
    sep = "+---+---+---+"
    lines = [sep]
    for r in range(ROW):
        cells = [str(t) if t != 0 else " " for t in s[r*ROW:(r+1)*ROW]]
        lines.append("| " + " | ".join(cells) + " |")
        lines.append(sep)
    return "\n".join(lines)
