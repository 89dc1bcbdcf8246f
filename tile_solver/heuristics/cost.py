from __future__ import annotations
from typing import TYPE_CHECKING

from tile_solver.heuristics.manhattan import manhattan_distance
from tile_solver.heuristics.linear_conflict import linear_conflicts

if TYPE_CHECKING:
    from tile_solver.domains.board import Board


def heuristic(board: "Board", goal: "Board") -> int:
    """h = Manhattan + linear conflicts."""
    return manhattan_distance(board, goal) + linear_conflicts(board, goal)


def evaluate(board: "Board", goal: "Board") -> int:
    """A* cost f = h + depth."""
    return heuristic(board, goal) + board.depth


def is_solved(board: "Board", goal: "Board") -> bool:
    return manhattan_distance(board, goal) == 0
