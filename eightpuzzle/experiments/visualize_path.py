#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Optional
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import GOAL, ROW, Board, scramble
from eightpuzzle.heuristics.registry import HEURISTICS, get_heuristic
from eightpuzzle.search.a_star import a_star

def draw_board(state: Board, out_path: Path, title: str = ""):
    n = ROW
    fig = plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,n], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=100)
    plt.close(fig)

def save_frames(start: Board, outdir: Path, heuristic: str = "manhattan") -> List[Path]:
    """Solve `start` and write one PNG per step; empty list if there is no solution."""
    res = a_star(start, GOAL, get_heuristic(heuristic))
    if not res.solved:
        return []
    frames = []
    for i, step in enumerate(res.path):
        p = outdir / f"step_{i:03d}.png"
        draw_board(step.board, p, title=f"{i}: {step.move.value}")
        frames.append(p)
    return frames

def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", type=Path, default=Path("results/figs/example_path"))
    args = p.parse_args(argv)

    frames = save_frames(scramble(args.depth, args.seed), args.outdir, args.heuristic)
    if not frames:
        print("No path (exhausted).")
        return 1
    print(f"Saved {len(frames)} frames to {args.outdir}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
