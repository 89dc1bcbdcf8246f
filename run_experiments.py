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
    run("python -m tile_solver.experiments.runner --n 3 --shuffles 10 20 30 --per_shuffle 10 --dedup both --max_expansions 200000 --out results/p8.csv")
    run("python -m tile_solver.experiments.runner --n 4 --shuffles 10 20 30 --per_shuffle 10 --dedup state --timeout_sec 60 --out results/p15.csv")
    run("python -m tile_solver.experiments.analyze results/p8.csv --out results/p8_summary.csv")
    run("python -m tile_solver.experiments.analyze results/p15.csv --out results/p15_summary.csv")

if __name__ == "__main__":
    main()
