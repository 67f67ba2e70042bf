#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.experiments.analyze import load_results

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def plot_metric(ax, df: pd.DataFrame, metric: str):
    g = (df.groupby(["algorithm", "heuristic", "depth"], as_index=False)
           .agg(mu=(metric, "mean"), se=(metric, sem)))
    for (algo, heur), sub in g.groupby(["algorithm", "heuristic"]):
        label = f"{algo} | {heur}" if heur else algo
        ax.errorbar(sub["depth"], sub["mu"], yerr=sub["se"], marker="o", capsize=3, label=label)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± SEM)")
    ax.grid(True, alpha=0.25, ls=":")
    ax.legend()

def save_plots(df: pd.DataFrame, outdir: Path, base: str,
               metrics=("expanded", "generated", "time_sec")) -> List[Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    saved = []
    for metric in metrics:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        fig.tight_layout()
        path = outdir / f"{base}_{metric}.png"
        fig.savefig(path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        saved.append(path)
        print(f"Saved: {path}")
    return saved

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--solvable_only", action="store_true")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if args.solvable_only and "solvable" in df.columns:
        df = df[df["solvable"] == 1]
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return 0
    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    save_plots(df, args.save, base)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
