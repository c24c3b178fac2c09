"""
Board module for Reversi.
Handles the board grid, the eight-direction capture scan and move resolution.
The board is stored as a numpy array indexed [y, x].
"""
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple
import numpy as np

from .exceptions import CannotPlaceDiskError, InvalidConfigurationError

# Board dimensions
MIN_BOARD_SIZE = 6
MAX_BOARD_SIZE = 10

EMPTY = 0

# Directions as (dx, dy): E, W, S, N, SE, NW, SW, NE
DIRECTIONS = [
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
]


class Disk(IntEnum):
    """Color of a disk. Every player is bound to one disk for the whole game."""
    WHITE = 1
    BLACK = 2

    def opposite(self) -> 'Disk':
        return Disk.BLACK if self is Disk.WHITE else Disk.WHITE


SYMBOLS = {EMPTY: '.', Disk.WHITE: 'W', Disk.BLACK: 'B'}
_SYMBOL_VALUES = {symbol: int(value) for value, symbol in SYMBOLS.items()}


def validate_board_size(size: int, min_size: int = MIN_BOARD_SIZE,
                        max_size: int = MAX_BOARD_SIZE) -> int:
    """
    Check that a board size is an even integer within [min_size, max_size].

    Returns:
        The size as a plain int

    Raises:
        InvalidConfigurationError: if the size is not usable
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidConfigurationError(f"Board size must be an integer, got {size!r}")
    size = int(size)
    if size < min_size or size > max_size:
        raise InvalidConfigurationError(
            f"Board size must be between {min_size} and {max_size}, got {size}"
        )
    if size % 2 != 0:
        raise InvalidConfigurationError(f"Board size must be an even number, got {size}")
    return size


class Board:
    """
    Square Reversi board holding EMPTY, WHITE or BLACK in every cell.
    """

    def __init__(self, size: int = 8):
        """Initialize a board in the starting position."""
        self.size = validate_board_size(size)
        self._board = np.zeros((self.size, self.size), dtype=np.int8)

        mid = self.size // 2
        self._board[mid - 1, mid - 1] = Disk.WHITE
        self._board[mid, mid] = Disk.WHITE
        self._board[mid, mid - 1] = Disk.BLACK
        self._board[mid - 1, mid] = Disk.BLACK

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from text rows, top row first.

        Args:
            rows: One string per row made of '.', 'W' and 'B'

        Returns:
            Board holding exactly the given cells
        """
        cells = []
        for row in rows:
            try:
                cells.append([_SYMBOL_VALUES[symbol] for symbol in row])
            except KeyError as exc:
                raise InvalidConfigurationError(f"Unknown cell symbol {exc.args[0]!r}") from None
        return cls.from_list(cells)

    @classmethod
    def from_list(cls, cells: Sequence[Sequence[int]]) -> 'Board':
        """Build a board from nested lists of cell values, as written by to_list()."""
        board = cls(len(cells))
        grid = np.zeros((board.size, board.size), dtype=np.int8)
        for y, row in enumerate(cells):
            if len(row) != board.size:
                raise InvalidConfigurationError(
                    f"Row {y} has {len(row)} cells, expected {board.size}"
                )
            for x, value in enumerate(row):
                if (isinstance(value, bool) or not isinstance(value, (int, np.integer))
                        or value not in SYMBOLS):
                    raise InvalidConfigurationError(f"Invalid cell value {value!r} at ({x}, {y})")
                grid[y, x] = value
        board._board = grid
        return board

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Optional[Disk]:
        """Return the disk at (x, y), or None if the cell is empty."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.size}x{self.size} board")
        value = self._board[y, x]
        if value == EMPTY:
            return None
        return Disk(int(value))

    def set(self, x: int, y: int, disk: Disk) -> None:
        self._board[y, x] = disk

    def count(self, disk: Disk) -> int:
        return int(np.count_nonzero(self._board == disk))

    def copy(self) -> 'Board':
        new_board = Board(self.size)
        new_board._board = self._board.copy()
        return new_board

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array indexed [y, x] (0 = empty, 1 = white, 2 = black)
        """
        return self._board.copy()

    def to_list(self) -> List[List[int]]:
        return self._board.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._board, other._board)

    def __str__(self) -> str:
        rows = []
        for y in range(self.size):
            rows.append(' '.join(SYMBOLS[int(value)] for value in self._board[y]))
        return "\n".join(rows)


def captures(board: Board, disk: Disk, x: int, y: int, dx: int, dy: int) -> bool:
    """
    Check whether a disk placed at (x, y) would sandwich at least one
    opponent disk in direction (dx, dy).
    """
    if (dx, dy) not in DIRECTIONS:
        raise ValueError(f"Invalid direction ({dx}, {dy})")

    opponent = disk.opposite()
    cx, cy = x + dx, y + dy
    if not board.in_bounds(cx, cy) or board.get(cx, cy) != opponent:
        return False

    cx += dx
    cy += dy
    while board.in_bounds(cx, cy):
        cell = board.get(cx, cy)
        if cell is None:
            return False
        if cell == disk:
            return True
        cx += dx
        cy += dy

    # Ran off the board without a closing disk
    return False


def flip_run(board: Board, disk: Disk, x: int, y: int, dx: int, dy: int) -> int:
    """
    Flip the run of opponent disks next to (x, y) in direction (dx, dy).
    Only valid where captures() holds for the same arguments.

    Returns:
        Number of disks flipped
    """
    opponent = disk.opposite()
    flipped = 0
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy) and board.get(cx, cy) == opponent:
        board.set(cx, cy, disk)
        flipped += 1
        cx += dx
        cy += dy
    return flipped


def is_legal(board: Board, disk: Disk, x: int, y: int) -> bool:
    """Check if placing disk at (x, y) is a legal move."""
    if not board.in_bounds(x, y) or board.get(x, y) is not None:
        return False
    return any(captures(board, disk, x, y, dx, dy) for dx, dy in DIRECTIONS)


def apply_move(board: Board, disk: Disk, x: int, y: int) -> int:
    """
    Place disk at (x, y) and flip every captured run.

    Returns:
        Total number of flipped disks (at least 1)

    Raises:
        CannotPlaceDiskError: if the move is not legal; the board is left untouched
    """
    if not is_legal(board, disk, x, y):
        raise CannotPlaceDiskError(f"Cannot place {disk.name} disk at ({x}, {y})")

    capturing = [(dx, dy) for dx, dy in DIRECTIONS if captures(board, disk, x, y, dx, dy)]

    board.set(x, y, disk)
    flipped = 0
    for dx, dy in capturing:
        flipped += flip_run(board, disk, x, y, dx, dy)
    return flipped


def legal_moves(board: Board, disk: Disk) -> List[Tuple[int, int]]:
    """
    Get all legal moves for the given disk.

    Returns:
        List of (x, y) tuples in row-major order
    """
    return [
        (x, y)
        for y in range(board.size)
        for x in range(board.size)
        if is_legal(board, disk, x, y)
    ]


def any_legal_move(board: Board, disk: Disk) -> bool:
    return any(
        is_legal(board, disk, x, y)
        for y in range(board.size)
        for x in range(board.size)
    )


def count_disks(board: Board) -> Tuple[int, int]:
    """
    Count the disks of each color.

    Returns:
        Tuple of (white_count, black_count)
    """
    return board.count(Disk.WHITE), board.count(Disk.BLACK)
