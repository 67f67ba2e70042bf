#!/usr/bin/env python3
"""Solve one 8-puzzle read from a text file and print every step."""
from __future__ import annotations
import argparse
import logging
import sys
from time import perf_counter
from typing import List, Optional

from eightpuzzle.domains.puzzle8 import GOAL, InvalidBoardError, format_board, parse_board
from eightpuzzle.heuristics.registry import HEURISTICS, get_heuristic
from eightpuzzle.search.a_star import SearchConfig, SearchStatus, a_star

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Optimal 8-puzzle solver (A*).")
    p.add_argument("path", help="Text file holding at least 9 digits, row-major; other characters are ignored")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--max-expansions", type=int, default=None,
                   help="Give up after this many node expansions")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        # raw bytes: anything that is not an ASCII digit is ignored by parse_board
        with open(args.path, "rb") as f:
            text = f.read().decode("latin-1")
    except OSError as e:
        print(f"error: cannot open {args.path}: {e.strerror or e}", file=sys.stderr)
        return 1

    try:
        start = parse_board(text)
    except InvalidBoardError as e:
        print(f"error: {args.path}: {e}", file=sys.stderr)
        return 1

    t0 = perf_counter()
    res = a_star(start, GOAL, get_heuristic(args.heuristic),
                 SearchConfig(max_expansions=args.max_expansions))
    elapsed = perf_counter() - t0

    if res.status is SearchStatus.EXHAUSTED:
        print("No solution: board is unsolvable.")
        return 1
    if res.status is SearchStatus.LIMIT_REACHED:
        print(f"Gave up after {res.expanded} expansions (limit {args.max_expansions}).")
        return 1

    for step in res.path:
        print(step.move.value)
        print(format_board(step.board))
    print(f"Total steps: {res.steps}")
    print(f"Elapsed: {elapsed:.6f}s")
    return 0

if __name__ == "__main__":
    sys.exit(main())
