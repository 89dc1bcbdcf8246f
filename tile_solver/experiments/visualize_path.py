#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import List, Sequence

import numpy as np
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tile_solver.codec import decode_board_info
from tile_solver.domains.board import Board
from tile_solver.domains.tile import BLANK_TILE
from tile_solver.search.a_star import a_star


def replay(start: Board, moves: str) -> List[Board]:
    """Every board from start through each move in order."""
    frames = [start]
    for m in moves:
        frames.append(frames[-1].child(m))
    return frames


def draw_board(symbols: Sequence[int], n: int, out_path: Path):
    grid = np.array(symbols).reshape(n, n)
    plt.figure(figsize=(3, 3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n + 1):
        ax.plot([0, n], [i, i], linewidth=1)
        ax.plot([i, i], [0, n], linewidth=1)
    # tiles
    for (r, c), t in np.ndenumerate(grid):
        if t == BLANK_TILE: continue
        ax.text(c + 0.5, r + 0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--board", default=None, help="Encoded board; overrides --n/--shuffle/--seed")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--shuffle", type=int, default=20)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="figs/example_path")
    args = p.parse_args(argv)

    if args.board:
        try:
            n, symbols = decode_board_info(args.board)
        except ValueError as e:
            raise SystemExit(f"error: {e}")
        goal = Board(n, None, -1)
        start = Board.from_symbols(n, symbols, goal)
    else:
        goal = Board(args.n, None, -1)
        start = Board.shuffled(goal, args.shuffle, args.seed)

    res = a_star(start, goal)
    if res["path"] is None:
        print("No path (timeout or exhausted). Try a shorter shuffle.")
        return

    outdir = Path(args.outdir)
    frames = replay(start, res["path"])
    for i, b in enumerate(frames):
        draw_board(b.key(), b.n, outdir / f"step_{i:03d}.png")
    print(f"Saved {len(frames)} frames to {outdir}")


if __name__ == "__main__":
    main()
