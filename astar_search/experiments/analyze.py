#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

METRICS = ["expanded", "generated", "duplicates", "g", "time_sec"]
GROUP = ["algorithm", "heuristic", "depth"]


def load_results(paths: Iterable) -> pd.DataFrame:
    """Concatenate runner CSVs, normalise the schema and keep finished runs only."""
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=GROUP + METRICS)
    df = pd.concat(frames, ignore_index=True, sort=False)

    # Normalize schema
    if "algorithm" not in df.columns and "algo" in df.columns:
        df = df.rename(columns={"algo": "algorithm"})
    if "time_sec" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time": "time_sec"})
    if "heuristic" not in df.columns:
        df["heuristic"] = ""

    # Keep clean rows only
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]
    if "solvable" in df.columns:
        df = df[df["solvable"].fillna(1).astype(int) == 1]

    for c in ["depth", "seed"] + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df.reset_index(drop=True)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean and count of each metric per (algorithm, heuristic, depth)."""
    metrics = [m for m in METRICS if m in df.columns]
    out = df.groupby(GROUP, dropna=False)[metrics].mean()
    out["runs"] = df.groupby(GROUP, dropna=False).size()
    return out.reset_index().sort_values(GROUP, kind="stable").reset_index(drop=True)


def time_ratio(summary: pd.DataFrame, num: str = "IDA*", den: str = "A*", metric: str = "time_sec") -> pd.DataFrame:
    """Per (heuristic, depth): mean `metric` of `num` divided by that of `den`."""
    wide = summary.pivot_table(index=["heuristic", "depth"], columns="algorithm", values=metric)
    if num not in wide.columns or den not in wide.columns:
        return pd.DataFrame(columns=["heuristic", "depth", "ratio"])
    ratio = wide[num] / wide[den].replace(0, np.nan)
    return ratio.rename("ratio").reset_index()


def optimal_cost_mismatches(df: pd.DataFrame) -> pd.DataFrame:
    """Instances where algorithms that should be optimal disagree on g."""
    keys = [k for k in ("heuristic", "depth", "seed") if k in df.columns]
    opt = df[df["algorithm"].isin(["A*", "IDA*"])]
    spread = opt.groupby(keys)["g"].agg(["min", "max"]).reset_index()
    return spread[spread["min"] != spread["max"]]


def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs (mean metrics, IDA*/A* ratio)")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--out", type=Path, default=None, help="Optional path for the summary CSV")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return

    summary = summarize(df)
    print("=" * 80)
    print("Mean metrics by algorithm / heuristic / depth")
    print("=" * 80)
    print(summary.to_string(index=False, float_format=lambda x: f"{x:.4f}"))

    ratio = time_ratio(summary)
    if not ratio.empty:
        print("\nIDA*/A* time ratio")
        print("-" * 60)
        print(ratio.to_string(index=False, float_format=lambda x: f"{x:.2f}"))

    bad = optimal_cost_mismatches(df)
    if not bad.empty:
        print(f"\nWARNING: {len(bad)} instances where A* and IDA* costs differ")
        print(bad.to_string(index=False))

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(args.out, index=False)
        print(f"\nSaved: {args.out}")


if __name__ == "__main__":
    main()
