"""Game session: owns the board, the falling piece, score and status.

The session never schedules anything itself. Whoever drives it calls
``tick()`` on a fixed cadence and the discrete commands as input arrives,
and stops ticking once ``is_over`` is true.
"""
import enum
import logging
from typing import Optional, Tuple, Union

from blockfall_board import Board, Cell, clear_lines, collides, merge
from blockfall_config import CONFIG
from blockfall_piece import ActivePiece, random_piece, try_drop, try_rotate, try_shift
from blockfall_rng import PieceRandom

log = logging.getLogger(__name__)


class Status(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Command(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    ROTATE = "rotate"
    DOWN = "down"

    @classmethod
    def parse(cls, value) -> Optional["Command"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class GameSession:
    def __init__(self, rng=None, board: Optional[Board] = None):
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.board = board.copy() if board is not None else Board.create_empty()
        self.score = 0
        self.lines = 0
        self.status = Status.PLAYING
        self.active: Optional[ActivePiece] = None
        self._spawn()

    @property
    def is_over(self) -> bool:
        return self.status is Status.GAME_OVER

    def restart(self) -> None:
        self.board = Board.create_empty(self.board.width, self.board.height)
        self.score = 0
        self.lines = 0
        self.status = Status.PLAYING
        self.active = None
        log.info("session restarted")
        self._spawn()

    # commands

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        if self.is_over:
            return False
        moved = try_rotate(self.board, self.active)
        if moved is None:
            return False
        self.active = moved
        return True

    def soft_drop(self) -> bool:
        """Move the piece down one row, or lock it if it is grounded.

        Returns True only when the piece actually moved.
        """
        if self.is_over:
            return False
        moved = try_drop(self.board, self.active)
        if moved is None:
            self._lock()
            return False
        self.active = moved
        return True

    tick = soft_drop

    def command(self, cmd: Union[Command, str]) -> bool:
        parsed = Command.parse(cmd)
        if parsed is None:
            log.debug("ignoring unknown command %r", cmd)
            return False
        handler = {
            Command.LEFT: self.move_left,
            Command.RIGHT: self.move_right,
            Command.ROTATE: self.rotate,
            Command.DOWN: self.soft_drop,
        }[parsed]
        return handler()

    # output

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Board rows with the falling piece drawn over them."""
        grid = [list(row) for row in self.board.rows]
        if self.active is not None:
            for x, y in self.active.cells():
                if self.board.in_bounds(x, y):
                    grid[y][x] = self.active.color
        return tuple(tuple(row) for row in grid)

    # internals

    def _shift(self, dx: int) -> bool:
        if self.is_over:
            return False
        moved = try_shift(self.board, self.active, dx)
        if moved is None:
            return False
        self.active = moved
        return True

    def _lock(self) -> None:
        piece = self.active
        merge(self.board, piece)
        log.debug("locked %s at %s", piece.kind, piece.position)
        result = clear_lines(self.board)
        if result.count:
            self.board = result.board
            self.lines += result.count
            self.score += result.points
        self._spawn()

    def _spawn(self) -> None:
        x, y = CONFIG["SPAWN_X"], CONFIG["SPAWN_Y"]
        t = random_piece(self.rng)
        if collides(t.shape, self.board, x, y):
            self.active = None
            self.status = Status.GAME_OVER
            log.info("game over: %s cannot spawn at (%d, %d), final score %d", t.kind, x, y, self.score)
            return
        self.active = ActivePiece.spawn(t, x, y)
