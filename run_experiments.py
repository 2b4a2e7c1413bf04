#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("Manhattan both", "python -m astar_search.experiments.runner --depths 6 10 14 18 --per_depth 20 --heuristic manhattan --algo both --out results/manhattan.csv")
    run("LinearConflict both", "python -m astar_search.experiments.runner --depths 6 10 14 18 --per_depth 20 --heuristic linear_conflict --algo both --out results/linear_conflict.csv")
    run("A*/BFS unsolvable", "python -m astar_search.experiments.runner --depths 6 10 --per_depth 5 --algo a --include_unsolvable --out results/unsolvable.csv")
    run("Summary", "python -m astar_search.experiments.analyze results/manhattan.csv results/linear_conflict.csv --out results/summary.csv")
    run("Plots", "python -m astar_search.experiments.plot results/manhattan.csv results/linear_conflict.csv --save results/plots")
    run("Reference boards", "python -m astar_search.experiments.benchmark --budget_sec 1.0")

if __name__ == "__main__":
    main()
