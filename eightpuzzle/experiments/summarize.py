#!/usr/bin/env python3
from __future__ import annotations
import argparse, glob, os
from pathlib import Path
import numpy as np
import pandas as pd

METRICS = ("time_sec", "expanded", "generated", "g")

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load_many(patterns) -> pd.DataFrame:
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(pat)):
            df = pd.read_csv(fn)
            df["__src__"] = os.path.basename(fn)
            dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    for c in METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per algorithm: instance counts by termination, mean/sem of each metric over solved rows."""
    if df.empty:
        return pd.DataFrame()
    counts = df.pivot_table(index="algorithm", columns="termination", values="instance",
                            aggfunc="count", fill_value=0)
    solved = df[df["termination"] == "ok"]
    stats = solved.groupby("algorithm")[list(METRICS)].agg(["mean", sem])
    stats.columns = [f"{m}_{s}" for m, s in stats.columns]
    return counts.join(stats, how="left")

def length_mismatches(df: pd.DataFrame) -> pd.DataFrame:
    """Instances solved by both algorithms with different move counts (should be empty)."""
    solved = df[df["termination"] == "ok"]
    wide = solved.pivot_table(index=["__src__", "instance"], columns="algorithm", values="g", aggfunc="first")
    if wide.shape[1] < 2:
        return wide.iloc[0:0]
    return wide[wide.nunique(axis=1) > 1]

def main():
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per algorithm")
    ap.add_argument("csv", nargs="+", help="CSV files or glob patterns")
    ap.add_argument("--out", type=Path, default=None, help="optional CSV for the summary table")
    args = ap.parse_args()

    df = load_many(args.csv)
    if df.empty:
        print("No rows found.")
        return

    table = summarize(df)
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.round(4).to_string())

    bad = length_mismatches(df)
    if len(bad):
        print(f"\nMove-count mismatch on {len(bad)} instance(s):")
        print(bad.to_string())

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out)
        print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
