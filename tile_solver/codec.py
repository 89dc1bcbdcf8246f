"""Text boundary between a host (browser UI, CLI) and the solver.

Boards arrive as ``"N,t1,t2,...,tN²"`` with -1 marking the blank, e.g.
``"3,8,4,6,3,7,1,5,2,-1"``. Solutions leave as a string of move codes
(U/D/L/R), each naming the direction the blank travels.
"""
from __future__ import annotations
from typing import List, Optional, Tuple

from tile_solver.domains.board import is_solvable
from tile_solver.domains.tile import BLANK_TILE
from tile_solver.search.a_star import solve_tiles


class PuzzleFormatError(ValueError):
    """The encoded board is not a well-formed N×N permutation."""


class UnsolvablePuzzleError(ValueError):
    """The permutation has the wrong parity to reach the solved board."""


class SearchAborted(RuntimeError):
    """The search stopped (budget, timeout or exhaustion) without a solution."""

    def __init__(self, result: dict):
        super().__init__(f"search stopped without a solution: {result.get('termination')}")
        self.result = result


def decode_board_info(text: str) -> Tuple[int, List[int]]:
    fields = [f.strip() for f in text.split(",")]
    try:
        values = [int(f) for f in fields]
    except ValueError:
        raise PuzzleFormatError(f"non-integer field in {text!r}") from None
    n, symbols = values[0], values[1:]
    if n < 2:
        raise PuzzleFormatError(f"board size must be at least 2, got {n}")
    if len(symbols) != n * n:
        raise PuzzleFormatError(f"expected {n * n} tiles for N={n}, got {len(symbols)}")
    if symbols.count(BLANK_TILE) != 1:
        raise PuzzleFormatError(f"expected exactly one blank ({BLANK_TILE}), got {symbols.count(BLANK_TILE)}")
    if sorted(s for s in symbols if s != BLANK_TILE) != list(range(1, n * n)):
        raise PuzzleFormatError(f"tiles must be a permutation of 1..{n * n - 1}")
    return n, symbols


def encode_board_info(n: int, symbols: List[int]) -> str:
    return ",".join(str(v) for v in [n, *symbols])


def encode_moves(path: Optional[str]) -> str:
    return path or ""


def solve_board(text: str, check_solvable: bool = True, **kwargs) -> str:
    """Decode, solve and encode in one call; kwargs go to a_star."""
    n, symbols = decode_board_info(text)
    if check_solvable and not is_solvable(symbols, n):
        raise UnsolvablePuzzleError(f"board {text!r} cannot reach the solved arrangement")
    res = solve_tiles(n, symbols, **kwargs)
    if res["termination"] != "ok":
        raise SearchAborted(res)
    return encode_moves(res["path"])
