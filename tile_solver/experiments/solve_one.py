#!/usr/bin/env python3
import argparse
import logging

from tile_solver.codec import solve_board, SearchAborted


def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one encoded board, e.g. '3,8,4,6,3,7,1,5,2,-1'.")
    p.add_argument("board_info", help="N followed by N² row-major tiles, -1 for the blank")
    p.add_argument("--dedup", choices=["state", "path"], default="state")
    p.add_argument("--tie_break", choices=["fifo", "lifo", "h", "g"], default="fifo")
    p.add_argument("--max_expansions", type=int, default=None)
    p.add_argument("--timeout_sec", type=float, default=None)
    p.add_argument("--no_parity_check", action="store_true", help="Skip the solvability check")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        moves = solve_board(args.board_info, check_solvable=not args.no_parity_check,
                            dedup=args.dedup, tie_break=args.tie_break,
                            max_expansions=args.max_expansions, timeout_sec=args.timeout_sec)
    except ValueError as e:
        raise SystemExit(f"error: {e}")
    except SearchAborted as e:
        raise SystemExit(f"no solution: {e.result['termination']} after {e.result['expanded']} expansions")
    print(moves)


if __name__ == "__main__":
    main()
