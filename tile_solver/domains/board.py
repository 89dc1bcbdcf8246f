from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import random

from tile_solver.domains.tile import BLANK_TILE, Tile, generate_solved_sequence
from tile_solver.heuristics.cost import evaluate

State = Tuple[int, ...]

# Blank move directions, also the characters of an encoded solution
UP = "U"
DOWN = "D"
LEFT = "L"
RIGHT = "R"

# Generation order, kept fixed so searches are reproducible
MOVES: Tuple[str, ...] = (UP, DOWN, LEFT, RIGHT)

OPPOSITE_DIRECTIONS: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}


class Board:
    """One node of the N×N sliding-tile state space.

    Tiles are stored row-major. A board is treated as a value: the search
    copies a parent and applies one move to the copy, never to the parent.
    Equality and hashing only look at the tile permutation.
    """

    def __init__(self, n: int, goal: Optional["Board"] = None, depth: int = 0,
                 tiles: Optional[Sequence[Tile]] = None):
        self.n = n
        self.tile_count = n * n
        self.goal = goal
        self.depth = depth
        self.last_direction: Optional[str] = None
        self.path = ""
        if tiles:
            self.tiles: List[Tile] = list(tiles)
        else:
            self.tiles = generate_solved_sequence(n)
        self.blank_position = self.find_blank()
        self.cost = -1
        if goal is not None:
            self.update_cost()

    @classmethod
    def from_symbols(cls, n: int, symbols: Sequence[int], goal: Optional["Board"] = None,
                     depth: int = 0) -> "Board":
        return cls(n, goal, depth, [Tile(s) for s in symbols])

    # ---------- Identity ----------
    def key(self) -> State:
        return tuple(t.symbol for t in self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.key())

    def __lt__(self, other: "Board") -> bool:
        return self.cost < other.cost

    def __repr__(self) -> str:
        return f"Board(n={self.n}, tiles={self.key()}, depth={self.depth}, cost={self.cost})"

    # ---------- Geometry ----------
    def find_blank(self) -> int:
        for i, tile in enumerate(self.tiles):
            if tile.is_blank():
                return i
        return -1

    def index_at(self, row: int, col: int, board: Optional["Board"] = None) -> Tile:
        board = self if board is None else board
        return board.tiles[row * self.n + col]

    def to_display_string(self) -> str:
        lines = []
        for row in range(self.n):
            lines.append(", ".join(str(self.index_at(row, col)) for col in range(self.n)))
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.to_display_string()

    # ---------- Moves ----------
    def is_valid_move(self, direction: str) -> bool:
        if self.last_direction is not None and OPPOSITE_DIRECTIONS[direction] == self.last_direction:
            return False
        if direction == UP and self.blank_position - self.n < 0:
            return False
        if direction == DOWN and self.blank_position + self.n >= self.tile_count:
            return False
        if direction == LEFT and self.blank_position % self.n == 0:
            return False
        return not (direction == RIGHT and (self.blank_position + 1) % self.n == 0)

    def available_moves(self) -> List[str]:
        return [m for m in MOVES if self.is_valid_move(m)]

    def translate_index(self, position: int, direction: str) -> int:
        """Index reached by stepping from position; callers validate first."""
        if direction == UP:
            return position - self.n
        if direction == DOWN:
            return position + self.n
        if direction == LEFT:
            return position - 1
        return position + 1

    def apply_move(self, direction: str) -> None:
        """Slide the blank one cell in place. Only call on a fresh copy."""
        swap_i = self.translate_index(self.blank_position, direction)
        z = self.blank_position
        self.tiles[z], self.tiles[swap_i] = self.tiles[swap_i], self.tiles[z]
        self.last_direction = direction
        self.blank_position = swap_i

    # ---------- Search bookkeeping ----------
    def update_cost(self) -> int:
        self.cost = evaluate(self, self.goal) if self.goal is not None else -1
        return self.cost

    def copy(self) -> "Board":
        # __init__ is skipped so the goal is shared and cost is not recomputed
        other = Board.__new__(Board)
        other.n = self.n
        other.tile_count = self.tile_count
        other.goal = self.goal
        other.depth = self.depth
        other.last_direction = self.last_direction
        other.path = self.path
        other.tiles = list(self.tiles)
        other.blank_position = self.blank_position
        other.cost = self.cost
        return other

    def child(self, direction: str) -> "Board":
        """Copy, move, and re-score: the child node reached via direction."""
        nxt = self.copy()
        nxt.apply_move(direction)
        nxt.path = self.path + direction
        nxt.depth = self.depth + 1
        nxt.update_cost()
        return nxt

    # ---------- Instance generation ----------
    @classmethod
    def shuffled(cls, goal: "Board", n_moves: int, seed: Optional[int] = None) -> "Board":
        """Random walk of n_moves valid blank moves away from the solved board.

        Only legal moves are applied, so the result is always solvable.
        """
        rng = random.Random(seed)
        board = cls(goal.n, None, 0, goal.tiles)
        for _ in range(n_moves):
            board.apply_move(rng.choice(board.available_moves()))
        board.goal = goal
        board.depth = 0
        board.path = ""
        board.last_direction = None
        board.update_cost()
        return board


def is_solvable(symbols: Sequence[int], n: int) -> bool:
    """Parity rule for reaching the canonical goal (blank last).
       - N odd: inversions must be even
       - N even: (inversions + blank_row_from_bottom) must be ODD
         (row count is 1-based from the bottom)
    """
    arr = [x for x in symbols if x != BLANK_TILE]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    if n % 2 == 1:
        return (inv % 2) == 0
    blank_row_top_idx = list(symbols).index(BLANK_TILE) // n
    blank_row_from_bottom = n - blank_row_top_idx
    return ((inv + blank_row_from_bottom) % 2) == 1
