#!/usr/bin/env python3
import argparse, glob
from pathlib import Path

import numpy as np
import pandas as pd

NUMERIC = ("grid", "start", "paths", "dead_ends", "time_sec")

def load_many(patterns):
    dfs = []
    for pat in patterns:
        for fn in sorted(glob.glob(str(pat))):
            try:
                df = pd.read_csv(fn)
                dfs.append(df)
            except Exception as e:
                print(f"skip {fn}: {e}")
    if not dfs:
        return pd.DataFrame(columns=list(NUMERIC))
    df = pd.concat(dfs, ignore_index=True, sort=False)

    for c in NUMERIC:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    keep = [c for c in ("grid", "paths", "dead_ends") if c in df.columns]
    return df.dropna(subset=keep)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """One row per grid size."""
    if df.empty:
        return pd.DataFrame(columns=["grid", "runs", "starts_with_tour", "tours",
                                     "dead_ends_mean", "dead_ends_median",
                                     "dead_ends_max", "time_mean"])
    df = df.assign(found=(df["paths"] > 0).astype(int))
    g = df.groupby("grid")
    out = pd.DataFrame({
        "runs": g.size(),
        "starts_with_tour": g["found"].sum(),
        "tours": g["paths"].sum(),
        "dead_ends_mean": g["dead_ends"].mean(),
        "dead_ends_median": g["dead_ends"].median(),
        "dead_ends_max": g["dead_ends"].max(),
        "time_mean": g["time_sec"].mean() if "time_sec" in df.columns else np.nan,
    }).reset_index()
    return out.sort_values("grid").reset_index(drop=True)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize knight's tour runner CSVs per grid")
    ap.add_argument("inputs", nargs="*", default=["results/*.csv"])
    ap.add_argument("--out", type=Path, default=None)
    args = ap.parse_args(argv)

    df = load_many(args.inputs)
    if df.empty:
        print("No rows found.")
        return 1
    table = summarize(df)
    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(table.to_string(index=False))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
