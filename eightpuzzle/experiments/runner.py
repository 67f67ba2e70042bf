from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from eightpuzzle.domains.puzzle8 import (
    Board,
    GOAL,
    is_solvable,
    make_unsolvable,
    scramble,
)
from eightpuzzle.heuristics.registry import HEURISTICS, get_heuristic
from eightpuzzle.search.a_star import SearchConfig, SearchResult, a_star
from eightpuzzle.search.bfs import bfs

logger = logging.getLogger(__name__)

HEADER = [
    "algorithm","heuristic","depth","seed",
    "expanded","generated","duplicates","g","time_sec",
    "peak_open","peak_closed","termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: Board

def generate_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            s = scramble(d, seed)
            seed += 1
            attempts += 1
            if is_solvable(s):
                out.append(Instance(seed=seed, depth=d, state=s))
                made += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def make_row(res: SearchResult, heur: str, inst: Instance, solvable_flag: int) -> dict:
    r = res.to_dict()
    return {
        "algorithm": r["algorithm"], "heuristic": heur if r["algorithm"] != "BFS" else "",
        "depth": inst.depth, "seed": inst.seed,
        "expanded": r["expanded"], "generated": r["generated"], "duplicates": r["duplicates"],
        "g": "" if r["g"] is None else r["g"],
        "time_sec": f"{r['time']:.6f}",
        "peak_open": r["peak_open"], "peak_closed": r["peak_closed"],
        "termination": r["termination"], "solvable": solvable_flag,
    }

def run_instances(insts: List[Instance], heuristic: str, algo: str, out: Path,
                  max_expansions: Optional[int] = None, include_unsolvable: bool = False) -> int:
    """Run every instance (and optionally its parity-flipped twin); returns rows written."""
    hfun = get_heuristic(heuristic)
    cfg = SearchConfig(max_expansions=max_expansions)
    want_a = algo in ("a", "both")
    want_bfs = algo in ("bfs", "both")
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER); w.writeheader()
        for k, inst in enumerate(insts, 1):
            cases = [(inst.state, 1)]
            if include_unsolvable:
                cases.append((make_unsolvable(inst.state), 0))
            for state, flag in cases:
                if want_a:
                    w.writerow(make_row(a_star(state, GOAL, hfun, cfg), heuristic, inst, flag)); rows += 1
                if want_bfs:
                    w.writerow(make_row(bfs(state, GOAL, max_expansions), heuristic, inst, flag)); rows += 1
            logger.info("instance %d/%d done (depth=%d seed=%d)", k, len(insts), inst.depth, inst.seed)
    return rows

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="A* (+BFS baseline) 8-puzzle experiment runner")
    ap.add_argument("--algo", choices=["a", "bfs", "both"], default="a",
                    help="'both' = A* + BFS")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--max_expansions", type=int, default=None, help="Per-run expansion cap")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    insts = generate_instances(args.depths, args.per_depth, args.seed)
    rows = run_instances(insts, args.heuristic, args.algo, args.out,
                         max_expansions=args.max_expansions,
                         include_unsolvable=args.include_unsolvable)
    print(f"Wrote {args.out} ({len(insts)} instances, {rows} rows)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
