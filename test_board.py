"""
Tests for the Reversi board, the direction scanner and move resolution.
"""
import numpy as np
import pytest

from reversi.board import (
    Board,
    Disk,
    DIRECTIONS,
    any_legal_move,
    apply_move,
    captures,
    count_disks,
    flip_run,
    is_legal,
    legal_moves,
)
from reversi.exceptions import CannotPlaceDiskError, InvalidConfigurationError

# White to play at (2, 2) captures in seven directions, not towards (3, 2)
STAR_ROWS = [
    "W.W.W.",
    ".BBB..",
    "WB.B..",
    ".BBB..",
    "W.W.W.",
    "......",
]


def test_initial_board():
    """Test the starting layout for every supported size."""
    for size in (6, 8, 10):
        board = Board(size)
        mid = size // 2
        assert board.get(mid - 1, mid - 1) == Disk.WHITE
        assert board.get(mid, mid) == Disk.WHITE
        assert board.get(mid, mid - 1) == Disk.BLACK
        assert board.get(mid - 1, mid) == Disk.BLACK
        assert count_disks(board) == (2, 2)

        state = board.get_board_state()
        assert state.shape == (size, size), f"Board should be {size}x{size}"
        assert np.sum(state == 0) == size * size - 4


def test_invalid_board_size():
    """Test that bad sizes are rejected at construction."""
    for size in (4, 5, 7, 12, 8.0, True, "8"):
        with pytest.raises(InvalidConfigurationError):
            Board(size)

    # Configuration errors are value errors
    with pytest.raises(ValueError):
        Board(11)


def test_in_bounds_and_get():
    board = Board(6)
    assert board.in_bounds(0, 0)
    assert board.in_bounds(5, 5)
    assert not board.in_bounds(-1, 0)
    assert not board.in_bounds(0, 6)
    assert board.get(0, 0) is None

    with pytest.raises(IndexError):
        board.get(6, 0)


def test_disk_opposite():
    assert Disk.WHITE.opposite() == Disk.BLACK
    assert Disk.BLACK.opposite() == Disk.WHITE


def test_captures():
    """Test the scan along a single direction."""
    board = Board(6)
    assert captures(board, Disk.WHITE, 3, 1, 0, 1), "(3, 2) is sandwiched against (3, 3)"
    assert not captures(board, Disk.WHITE, 3, 1, 0, -1), "Off the board"
    assert not captures(board, Disk.WHITE, 3, 1, 1, 0), "Empty neighbour"
    assert not captures(board, Disk.WHITE, 1, 1, 1, 1), "Own disk next to the cell"

    leftwards = Board.from_rows(["WBB...", "......", "......", "......", "......", "......"])
    assert captures(leftwards, Disk.WHITE, 3, 0, -1, 0)
    assert not captures(leftwards, Disk.BLACK, 3, 0, -1, 0), "Own disk next to the cell"
    assert not captures(Board.from_rows([".BB...", "W.....", "......", "......", "......", "......"]),
                        Disk.WHITE, 0, 0, 1, 0), "Run ends on an empty cell"

    to_edge = Board.from_rows([".BBBBB", "......", "......", "......", "......", "......"])
    assert not captures(to_edge, Disk.WHITE, 0, 0, 1, 0), "Run reaches the edge"

    closed = Board.from_rows([".BBW..", "......", "......", "......", "......", "......"])
    assert captures(closed, Disk.WHITE, 0, 0, 1, 0)


def test_captures_rejects_bad_direction():
    with pytest.raises(ValueError):
        captures(Board(6), Disk.WHITE, 3, 1, 0, 0)
    with pytest.raises(ValueError):
        captures(Board(6), Disk.WHITE, 3, 1, 0, 2)


def test_flip_run():
    board = Board.from_rows([".BBW..", "......", "......", "......", "......", "......"])
    assert flip_run(board, Disk.WHITE, 0, 0, 1, 0) == 2
    assert board.get(1, 0) == Disk.WHITE
    assert board.get(2, 0) == Disk.WHITE
    assert board.get(3, 0) == Disk.WHITE
    assert board.get(0, 0) is None, "flip_run does not place the new disk"


def test_is_legal():
    """Test legality on the opening position."""
    board = Board(6)
    assert is_legal(board, Disk.WHITE, 3, 1)
    assert not is_legal(board, Disk.WHITE, 2, 2), "Occupied cell"
    assert not is_legal(board, Disk.WHITE, 0, 0), "Flips nothing"
    assert not is_legal(board, Disk.WHITE, -1, 0), "Off the board"
    assert not is_legal(board, Disk.WHITE, 6, 6), "Off the board"

    # Legal exactly when empty and some direction captures
    star = Board.from_rows(STAR_ROWS)
    for y in range(star.size):
        for x in range(star.size):
            expected = star.get(x, y) is None and any(
                captures(star, Disk.WHITE, x, y, dx, dy) for dx, dy in DIRECTIONS
            )
            assert is_legal(star, Disk.WHITE, x, y) == expected, f"Mismatch at ({x}, {y})"


def test_legal_moves():
    board = Board(6)
    assert legal_moves(board, Disk.WHITE) == [(3, 1), (4, 2), (1, 3), (2, 4)]
    assert legal_moves(board, Disk.BLACK) == [(2, 1), (1, 2), (4, 3), (3, 4)]


def test_apply_move_opening():
    """White plays (3, 1) on a 6x6 board and flips (3, 2)."""
    board = Board(6)
    assert apply_move(board, Disk.WHITE, 3, 1) == 1

    for x, y in [(2, 2), (3, 3), (3, 1), (3, 2)]:
        assert board.get(x, y) == Disk.WHITE, f"({x}, {y}) should be white"
    assert board.get(2, 3) == Disk.BLACK
    assert count_disks(board) == (4, 1)


def test_apply_move_multiple_directions():
    board = Board.from_rows(STAR_ROWS)
    assert count_disks(board) == (7, 8)

    assert apply_move(board, Disk.WHITE, 2, 2) == 7
    assert board.get(3, 2) == Disk.BLACK, "Run towards the empty cell is not closed"
    assert count_disks(board) == (15, 1)


def test_apply_illegal_move_leaves_board_untouched():
    board = Board(6)
    before = board.copy()
    for x, y in [(2, 2), (0, 0), (6, 6), (-1, 3)]:
        with pytest.raises(CannotPlaceDiskError):
            apply_move(board, Disk.WHITE, x, y)
        assert board == before, f"Board changed after illegal move at ({x}, {y})"


def test_apply_move_counts():
    """Every legal move adds 1 + flipped disks to the mover and removes flipped from the opponent."""
    for start in (Board(6), Board(8), Board.from_rows(STAR_ROWS)):
        for disk in Disk:
            for x, y in legal_moves(start, disk):
                board = start.copy()
                mover_before = board.count(disk)
                opponent_before = board.count(disk.opposite())

                flipped = apply_move(board, disk, x, y)

                assert flipped >= 1
                assert board.count(disk) == mover_before + 1 + flipped
                assert board.count(disk.opposite()) == opponent_before - flipped
                assert sum(count_disks(board)) == mover_before + opponent_before + 1


def test_any_legal_move():
    assert any_legal_move(Board(6), Disk.WHITE)
    assert any_legal_move(Board(6), Disk.BLACK)

    full = Board.from_rows(["WWWWWW"] * 3 + ["BBBBBB"] * 3)
    assert not any_legal_move(full, Disk.WHITE)
    assert not any_legal_move(full, Disk.BLACK)

    lone = Board.from_rows(["W....."] + ["......"] * 5)
    assert not any_legal_move(lone, Disk.WHITE)
    assert not any_legal_move(lone, Disk.BLACK)


def test_from_rows_validation():
    with pytest.raises(InvalidConfigurationError):
        Board.from_rows(["X....."] + ["......"] * 5)
    with pytest.raises(InvalidConfigurationError):
        Board.from_rows(["......."] + ["......"] * 5)
    with pytest.raises(InvalidConfigurationError):
        Board.from_rows(["....."] * 5)


def test_to_list_and_from_list():
    board = Board.from_rows(STAR_ROWS)
    cells = board.to_list()
    assert cells[2] == [1, 2, 0, 2, 0, 0]
    assert Board.from_list(cells) == board

    with pytest.raises(InvalidConfigurationError):
        Board.from_list([[3] * 6] * 6)

    # Only plain integers are cell values
    for value in (True, 1.0, "1"):
        bad_cells = [row[:] for row in cells]
        bad_cells[0][1] = value
        with pytest.raises(InvalidConfigurationError):
            Board.from_list(bad_cells)


def test_copy_is_independent():
    board = Board(6)
    copied = board.copy()
    apply_move(copied, Disk.WHITE, 3, 1)
    assert board == Board(6)
    assert copied != board


def test_str():
    lines = str(Board(6)).split("\n")
    assert len(lines) == 6
    assert lines[0] == ". . . . . ."
    assert lines[2] == ". . W B . ."
    assert lines[3] == ". . B W . ."


if __name__ == "__main__":
    print("Running Reversi board tests...\n")

    test_initial_board()
    test_captures()
    test_flip_run()
    test_is_legal()
    test_legal_moves()
    test_apply_move_opening()
    test_apply_move_multiple_directions()
    test_apply_move_counts()

    print("\nAll tests passed successfully!")
