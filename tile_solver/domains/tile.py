from __future__ import annotations
from dataclasses import dataclass
from typing import List

BLANK_TILE = -1


@dataclass(frozen=True)
class Tile:
    """One puzzle piece, or the blank when symbol == BLANK_TILE."""
    symbol: int

    def is_blank(self) -> bool:
        return self.symbol == BLANK_TILE

    def __str__(self) -> str:
        if self.is_blank():
            return "      "
        return f"Tile {self.symbol}"


def generate_solved_sequence(n: int) -> List[Tile]:
    """1, 2, ..., N²-1 followed by the blank."""
    tiles = [Tile(i) for i in range(1, n * n)]
    tiles.append(Tile(BLANK_TILE))
    return tiles
