from __future__ import annotations
from typing import TYPE_CHECKING, Dict, Set, Tuple

from tile_solver.heuristics.manhattan import goal_positions

if TYPE_CHECKING:
    from tile_solver.domains.board import Board
    from tile_solver.domains.tile import Tile


def in_conflict(pos_1: int, pos_2: int, goal_1: int, goal_2: int) -> bool:
    """Two tiles on one line whose current order is the reverse of their goal order."""
    return (pos_1 < pos_2 and goal_1 > goal_2) or (pos_1 > pos_2 and goal_1 < goal_2)


def linear_conflicts(board: "Board", goal: "Board") -> int:
    """2 per linearly-conflicting pair over rows, then columns.

    A tile is charged at most once: after it has been counted in a conflict it
    is skipped for every later pair, in rows and in columns alike.
    """
    n = board.n
    where: Dict["Tile", Tuple[int, int]] = {t: divmod(i, n) for t, i in goal_positions(goal).items()}
    charged: Set["Tile"] = set()
    total = 0
    # Row conflicts
    for r in range(n):
        for i in range(n - 1):
            ti = board.index_at(r, i)
            if ti.is_blank():
                continue
            for j in range(i + 1, n):
                tj = board.index_at(r, j)
                if tj.is_blank():
                    continue
                if where[ti][0] != r or where[tj][0] != r:
                    continue
                if ti in charged or tj in charged:
                    continue
                if in_conflict(i, j, where[ti][1], where[tj][1]):
                    total += 2
                    charged.add(ti)
                    charged.add(tj)
    # Column conflicts
    for c in range(n):
        for i in range(n - 1):
            ti = board.index_at(i, c)
            if ti.is_blank():
                continue
            for j in range(i + 1, n):
                tj = board.index_at(j, c)
                if tj.is_blank():
                    continue
                if where[ti][1] != c or where[tj][1] != c:
                    continue
                if ti in charged or tj in charged:
                    continue
                if in_conflict(i, j, where[ti][0], where[tj][0]):
                    total += 2
                    charged.add(ti)
                    charged.add(tj)
    return total
