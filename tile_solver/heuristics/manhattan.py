from __future__ import annotations
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from tile_solver.domains.board import Board
    from tile_solver.domains.tile import Tile


def goal_positions(goal: "Board") -> Dict["Tile", int]:
    """Map each tile to its index on the goal board."""
    return {tile: i for i, tile in enumerate(goal.tiles)}


def manhattan_distance(board: "Board", goal: "Board") -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    n = board.n
    where = goal_positions(goal)
    dist = 0
    for idx, tile in enumerate(board.tiles):
        if tile.is_blank():
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(where[tile], n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
