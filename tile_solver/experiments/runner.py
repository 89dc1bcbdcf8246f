#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from tile_solver.domains.board import Board, is_solvable
from tile_solver.search.a_star import a_star

HEADER = [
    "n", "shuffle_moves", "seed", "dedup", "tie_break",
    "solution_length", "moves", "expanded", "generated", "duplicates",
    "peak_open", "time_sec", "termination",
]


@dataclass
class Instance:
    seed: int
    shuffle_moves: int
    board: Board


def generate_instances(goal: Board, shuffles: List[int], per_shuffle: int, start_seed: int = 0) -> List[Instance]:
    """per_shuffle seeded random walks for each walk length in shuffles."""
    out: List[Instance] = []
    seed = start_seed
    for d in shuffles:
        for _ in range(per_shuffle):
            b = Board.shuffled(goal, d, seed)
            if not is_solvable(b.key(), goal.n):
                raise RuntimeError(f"Shuffled board for seed={seed} failed the parity check.")
            out.append(Instance(seed=seed, shuffle_moves=d, board=b))
            seed += 1
    return out


def result_row(res: dict, n: int, inst: Instance) -> list:
    return [
        n, inst.shuffle_moves, inst.seed, res["dedup"], res["tie_break"],
        res["g"] if res["g"] is not None else "", res["path"] or "",
        res["expanded"], res["generated"], res["duplicates"],
        res["peak_open"], f"{res['time']:.6f}", res["termination"],
    ]


def run(n: int, shuffles: List[int], per_shuffle: int, dedups: List[str], out: Path,
        tie_break: str = "fifo", max_expansions=None, timeout_sec=None, seed: int = 0) -> int:
    goal = Board(n, None, -1)
    insts = generate_instances(goal, shuffles, per_shuffle, seed)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            for dedup in dedups:
                r = a_star(inst.board, goal, dedup=dedup, tie_break=tie_break,
                           max_expansions=max_expansions, timeout_sec=timeout_sec)
                w.writerow(result_row(r, n, inst))
    return len(insts)


def main(argv=None):
    ap = argparse.ArgumentParser(description="A* sliding-tile experiment runner")
    ap.add_argument("--n", type=int, default=3, help="Board side length (N×N)")
    ap.add_argument("--shuffles", type=int, nargs="+", default=[10, 20, 30],
                    help="Random-walk lengths used to scramble the solved board")
    ap.add_argument("--per_shuffle", type=int, default=10)
    ap.add_argument("--dedup", choices=["state", "path", "both"], default="state")
    ap.add_argument("--tie_break", choices=["fifo", "lifo", "h", "g"], default="fifo")
    ap.add_argument("--max_expansions", type=int, default=None, help="Per-instance expansion budget")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--seed", type=int, default=0, help="First instance seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    dedups = ["state", "path"] if args.dedup == "both" else [args.dedup]
    count = run(args.n, args.shuffles, args.per_shuffle, dedups, args.out,
                tie_break=args.tie_break, max_expansions=args.max_expansions,
                timeout_sec=args.timeout_sec, seed=args.seed)
    print(f"Wrote {args.out} ({count} instances)")


if __name__ == "__main__":
    main()
