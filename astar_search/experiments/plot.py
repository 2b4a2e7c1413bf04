#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from astar_search.experiments.analyze import GROUP, load_results


def plot_metric(ax, df: pd.DataFrame, metric: str):
    """Mean ± std of `metric` against depth, one series per (algorithm, heuristic)."""
    stats = df.groupby(GROUP)[metric].agg(["mean", "std"]).reset_index()
    for (algo, heur), part in stats.groupby(["algorithm", "heuristic"]):
        # offset series a tiny bit so curves don't overlap
        offset = -0.12 if algo == "A*" else (0.12 if algo == "IDA*" else 0.0)
        xs = part["depth"].to_numpy(dtype=float) + offset
        ys = part["mean"].to_numpy(dtype=float)
        es = np.nan_to_num(part["std"].to_numpy(dtype=float))
        ax.errorbar(xs, ys, yerr=es, marker="o", capsize=3, label=f"{algo} | {heur or '-'}")
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def make_plots(df: pd.DataFrame, outdir: Path, base: str, close: bool = True) -> List[Path]:
    saved = []
    panel = [m for m in ("expanded", "generated", "time_sec") if m in df.columns]
    fig, axes = plt.subplots(1, len(panel), figsize=(5 * len(panel), 5), squeeze=False)
    for ax, metric in zip(axes[0], panel):
        plot_metric(ax, df, metric)
    fig.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    if close:
        plt.close(fig)

    for metric in ("expanded", "generated", "duplicates", "time_sec"):
        if metric not in df.columns:
            continue
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        if close:
            plt.close(fig)
    return saved


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return

    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    make_plots(df, Path(args.save), base, close=not args.show)

    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
