#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

KEYS = ["algorithm", "heuristic", "solvable", "depth"]
METRICS = ["expanded", "generated", "time_sec"]

def load_results(paths: Iterable[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs; numeric columns coerced, rows without depth dropped."""
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        df["file"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=KEYS + METRICS)
    df = pd.concat(frames, ignore_index=True)
    df["heuristic"] = df["heuristic"].fillna("")
    for col in ["depth", "solvable", "g"] + METRICS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df.dropna(subset=["depth"])

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of each metric per (algorithm, heuristic, solvable, depth)."""
    agg = {}
    for m in METRICS:
        agg[f"{m}_mean"] = (m, "mean")
        agg[f"{m}_std"] = (m, "std")
    agg["runs"] = ("expanded", "count")
    out = df.groupby(KEYS, as_index=False).agg(**agg)
    return out.fillna({f"{m}_std": 0.0 for m in METRICS}).sort_values(KEYS, ignore_index=True)

def check_optimality(df: pd.DataFrame) -> pd.DataFrame:
    """Rows where A* and BFS disagree on solution length for the same (seed, solvable) instance."""
    solved = df[df["termination"] == "ok"]
    a = solved[solved["algorithm"] == "A*"][["seed", "solvable", "g"]]
    b = solved[solved["algorithm"] == "BFS"][["seed", "solvable", "g"]]
    both = a.merge(b, on=["seed", "solvable"], suffixes=("_astar", "_bfs"))
    return both[both["g_astar"] != both["g_bfs"]]

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (mean/std by depth).")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV path for the summary")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    summary = summarize(df)
    with pd.option_context("display.max_rows", None, "display.width", 160):
        print(summary.to_string(index=False))
    bad = check_optimality(df)
    if not bad.empty:
        print(f"\nWARNING: {len(bad)} instance(s) where A* length != BFS length")
        print(bad.to_string(index=False))
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
