#!/usr/bin/env python3
import argparse
from pathlib import Path

import pandas as pd

METRICS = ["expanded", "generated", "duplicates", "time_sec", "solution_length"]
GROUP = ["n", "dedup", "shuffle_moves"]


def summarize(csv_path: Path) -> pd.DataFrame:
    """Mean/median/max of each metric per (n, dedup, shuffle_moves), plus unsolved counts."""
    df = pd.read_csv(csv_path)
    for m in METRICS:
        df[m] = pd.to_numeric(df[m], errors="coerce")
    df["unsolved"] = (df["termination"] != "ok").astype(int)
    grouped = df.groupby(GROUP)
    out = grouped[METRICS].agg(["mean", "median", "max"])
    out.columns = [f"{m}_{stat}" for m, stat in out.columns]
    out["unsolved"] = grouped["unsolved"].sum()
    return out.reset_index()


def main(argv=None):
    p = argparse.ArgumentParser(description="Summarize a runner CSV")
    p.add_argument("csv", type=Path)
    p.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = p.parse_args(argv)

    if not args.csv.exists():
        raise SystemExit(f"missing {args.csv}")
    table = summarize(args.csv)
    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(table.to_string(index=False))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved {args.out}")


if __name__ == "__main__":
    main()
