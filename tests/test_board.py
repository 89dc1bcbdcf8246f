import pytest

from tile_solver.domains.board import (
    DOWN, LEFT, MOVES, OPPOSITE_DIRECTIONS, RIGHT, UP, Board, is_solvable,
)
from tile_solver.domains.tile import BLANK_TILE, Tile
from tile_solver.heuristics.cost import evaluate

B = BLANK_TILE
FIXTURE = [8, 4, 6, 3, 7, 1, 5, 2, B]
CENTER_BLANK = [8, 4, 6, 3, B, 1, 5, 2, 7]
CORNER_BLANK = [B, 4, 6, 3, 8, 1, 5, 2, 7]


@pytest.fixture
def goal():
    return Board(3, None, -1)


def _blank_at(n, pos):
    symbols = list(range(1, n * n)) + [B]
    symbols[pos], symbols[-1] = symbols[-1], symbols[pos]
    return symbols


def test_opposite_directions():
    assert OPPOSITE_DIRECTIONS[UP] == DOWN
    assert OPPOSITE_DIRECTIONS[DOWN] == UP
    assert OPPOSITE_DIRECTIONS[LEFT] == RIGHT
    assert OPPOSITE_DIRECTIONS[RIGHT] == LEFT
    assert MOVES == (UP, DOWN, LEFT, RIGHT)


def test_solved_board_construction(goal):
    assert goal.n == 3
    assert goal.tile_count == 9
    assert goal.blank_position == 8
    assert goal.last_direction is None
    assert goal.depth == -1
    assert goal.cost == -1
    assert goal.path == ""
    assert goal.key() == (1, 2, 3, 4, 5, 6, 7, 8, B)


def test_board_with_goal_gets_cost(goal):
    board = Board.from_symbols(3, FIXTURE, goal, -1)
    assert board.goal is goal
    assert board.blank_position == 8
    assert board.cost == 17


def test_find_blank(goal):
    assert Board.from_symbols(3, CENTER_BLANK, goal).blank_position == 4
    assert Board.from_symbols(3, CORNER_BLANK, goal).blank_position == 0


def test_index_at(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    assert board.index_at(0, 0) == Tile(8)
    assert board.index_at(0, 1) == Tile(4)
    assert board.index_at(0, 2) == Tile(6)
    assert board.index_at(1, 1) == Tile(7)
    assert board.index_at(2, 2) == Tile(B)
    assert board.index_at(0, 0, goal) == Tile(1)


def test_to_display_string(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    assert board.to_display_string() == (
        "Tile 8, Tile 4, Tile 6\nTile 3, Tile 7, Tile 1\nTile 5, Tile 2,       \n"
    )


def test_is_valid_move(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    assert board.is_valid_move(UP)
    assert not board.is_valid_move(DOWN)
    assert board.is_valid_move(LEFT)
    assert not board.is_valid_move(RIGHT)

    board_2 = Board.from_symbols(3, CENTER_BLANK, goal)
    assert all(board_2.is_valid_move(m) for m in MOVES)

    board_3 = Board.from_symbols(3, CORNER_BLANK, goal)
    assert not board_3.is_valid_move(UP)
    assert board_3.is_valid_move(DOWN)
    assert not board_3.is_valid_move(LEFT)
    assert board_3.is_valid_move(RIGHT)


def test_available_moves_order(goal):
    assert Board.from_symbols(3, FIXTURE, goal).available_moves() == [UP, LEFT]
    assert Board.from_symbols(3, CENTER_BLANK, goal).available_moves() == [UP, DOWN, LEFT, RIGHT]
    assert Board.from_symbols(3, CORNER_BLANK, goal).available_moves() == [DOWN, RIGHT]


def test_last_direction_forbids_undo(goal):
    board = Board.from_symbols(3, CENTER_BLANK, goal)
    board.last_direction = UP
    assert not board.is_valid_move(DOWN)
    assert board.available_moves() == [UP, LEFT, RIGHT]


@pytest.mark.parametrize("n", [3, 4, 5])
def test_move_count_by_blank_position(n):
    goal = Board(n, None, -1)
    for pos in range(n * n):
        board = Board.from_symbols(n, _blank_at(n, pos), goal)
        r, c = divmod(pos, n)
        on_edge = (r in (0, n - 1)) + (c in (0, n - 1))
        expected = {0: 4, 1: 3, 2: 2}[on_edge]
        moves = board.available_moves()
        assert len(moves) == expected
        assert set(moves) <= set(MOVES)


def test_translate_index(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    assert board.translate_index(0, DOWN) == 3
    assert board.translate_index(0, RIGHT) == 1
    assert board.translate_index(8, UP) == 5
    assert board.translate_index(8, LEFT) == 7


def test_apply_move(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    board.apply_move(UP)
    assert board.key() == (8, 4, 6, 3, 7, B, 5, 2, 1)
    assert board.blank_position == 5
    assert board.last_direction == UP


def test_move_then_opposite_restores_tiles(goal):
    board = Board.from_symbols(3, CENTER_BLANK, goal)
    for m in MOVES:
        moved = board.copy()
        moved.apply_move(m)
        assert moved != board
        moved.apply_move(OPPOSITE_DIRECTIONS[m])
        assert moved == board
        assert moved.blank_position == board.blank_position
        assert moved.last_direction == OPPOSITE_DIRECTIONS[m]


def test_copy_is_independent(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    clone = board.copy()
    clone.apply_move(LEFT)
    assert board.key() == tuple(FIXTURE)
    assert board.blank_position == 8
    assert board.last_direction is None
    assert clone.goal is board.goal


def test_child_bookkeeping(goal):
    board = Board.from_symbols(3, FIXTURE, goal)
    child = board.child(UP)
    assert child.path == "U"
    assert child.depth == 1
    assert child.cost == evaluate(child, goal)
    assert child.cost >= board.depth + 1
    grandchild = child.child(LEFT)
    assert grandchild.path == "UL"
    assert grandchild.depth == 2


def test_equality_and_hash_ignore_history(goal):
    a = Board.from_symbols(3, FIXTURE, goal, 0)
    b = Board.from_symbols(3, FIXTURE, goal, 7)
    b.path = "ULDR"
    assert a == b
    assert len({a, b}) == 1
    assert a != goal


def test_ordering_by_cost(goal):
    near = Board.from_symbols(3, [1, 2, 3, 4, 5, 6, 7, B, 8], goal)
    far = Board.from_symbols(3, FIXTURE, goal)
    assert near < far
    assert sorted([far, near])[0] is near


def test_shuffled_is_seeded_and_reset(goal):
    a = Board.shuffled(goal, 25, seed=3)
    b = Board.shuffled(goal, 25, seed=3)
    assert a == b
    assert a.depth == 0
    assert a.path == ""
    assert a.last_direction is None
    assert a.goal is goal
    assert a.cost == evaluate(a, goal)
    assert is_solvable(a.key(), 3)
    assert goal.key() == (1, 2, 3, 4, 5, 6, 7, 8, B)


def test_shuffled_zero_moves_is_solved(goal):
    assert Board.shuffled(goal, 0, seed=1) == goal


def test_is_solvable():
    assert is_solvable([1, 2, 3, 4, 5, 6, 7, 8, B], 3)
    assert is_solvable(FIXTURE, 3)
    assert not is_solvable([2, 1, 3, 4, 5, 6, 7, 8, B], 3)
    solved_15 = list(range(1, 16)) + [B]
    assert is_solvable(solved_15, 4)
    swapped = [2, 1] + solved_15[2:]
    assert not is_solvable(swapped, 4)
    # one vertical move keeps a 15-puzzle solvable
    up = solved_15[:]
    up[11], up[15] = up[15], up[11]
    assert is_solvable(up, 4)
