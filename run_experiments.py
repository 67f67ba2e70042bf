#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run(f"{py} -m eightpuzzle.experiments.runner --depths 6 10 14 18 --per_depth 10 --heuristic manhattan --algo both --include_unsolvable --out results/manhattan.csv")
    run(f"{py} -m eightpuzzle.experiments.runner --depths 6 10 14 18 --per_depth 10 --heuristic linear_conflict --algo a --out results/linear_conflict.csv")
    run(f"{py} -m eightpuzzle.experiments.analyze results/manhattan.csv results/linear_conflict.csv --out results/summary.csv")
    run(f"{py} -m eightpuzzle.experiments.plot results/manhattan.csv results/linear_conflict.csv --solvable_only --save results/plots")

if __name__ == "__main__":
    main()
