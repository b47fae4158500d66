"""Board grid plus the helpers that act on it: collides, merge, clear_lines"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from blockfall_config import CONFIG, COLS, ROWS

log = logging.getLogger(__name__)

Cell = Optional[str]
Shape = List[List[int]]

OUT_OF_BOUNDS = object()


class Board:
    """Fixed-size grid of cells. ``None`` is empty, anything else is a color tag."""

    def __init__(self, rows: List[List[Cell]]):
        self.rows = rows
        self.height = len(rows)
        self.width = len(rows[0])

    @classmethod
    def create_empty(cls, width: int = COLS, height: int = ROWS) -> "Board":
        return cls([[None] * width for _ in range(height)])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int):
        if not self.in_bounds(x, y):
            return OUT_OF_BOUNDS
        return self.rows[y][x]

    def set(self, x: int, y: int, color: Cell) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} board")
        self.rows[y][x] = color

    def is_row_full(self, y: int) -> bool:
        return all(self.rows[y])

    def copy(self) -> "Board":
        return Board([row[:] for row in self.rows])

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.rows)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self):
        filled = sum(1 for row in self.rows for v in row if v)
        return f"Board({self.width}x{self.height}, filled={filled})"


def cells(shape: Shape, x: int, y: int):
    """Yield board coordinates covered by the occupied cells of shape at (x, y)."""
    for r, row in enumerate(shape):
        for c, v in enumerate(row):
            if v:
                yield x + c, y + r


def collides(shape: Shape, board: Board, x: int, y: int) -> bool:
    """Return True if shape at (x, y) leaves the grid on any side or overlaps a block."""
    for bx, by in cells(shape, x, y):
        if board.get(bx, by) is not None:
            return True
    return False


def merge(board: Board, piece) -> None:
    """Write the piece's color into the board (no collision check)."""
    for bx, by in cells(piece.shape, piece.x, piece.y):
        board.set(bx, by, piece.color)


@dataclass(frozen=True)
class LineClear:
    board: Board
    rows: Tuple[int, ...]
    points: int

    @property
    def count(self) -> int:
        return len(self.rows)


def clear_lines(board: Board) -> LineClear:
    """Drop full rows, pad the top with empty ones, and score the flat bonus.

    The input board is left untouched.
    """
    full = tuple(y for y in range(board.height) if board.is_row_full(y))
    if not full:
        return LineClear(board.copy(), (), 0)
    kept = [row[:] for y, row in enumerate(board.rows) if y not in full]
    fresh = [[None] * board.width for _ in full]
    points = len(full) * CONFIG["LINE_BONUS"]
    log.debug("cleared rows %s for %d points", full, points)
    return LineClear(Board(fresh + kept), full, points)
