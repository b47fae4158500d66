"""Piece catalog, rotation and the active-piece moves"""
import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Dict

from blockfall_board import Board, collides

log = logging.getLogger(__name__)

KINDS = ("I", "O", "T", "S", "Z", "J", "L")

SHAPES: Dict[str, List[List[int]]] = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "Z": [[1,1,0],[0,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
}

COLORS_BY_KIND: Dict[str, str] = {
    "I": "cyan",
    "O": "yellow",
    "T": "purple",
    "S": "green",
    "Z": "red",
    "J": "blue",
    "L": "orange",
}

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

@dataclass(frozen=True)
class Tetromino:
    kind: str
    shape: List[List[int]]
    color: str

    @staticmethod
    def of(kind: str) -> "Tetromino":
        return Tetromino(kind, [r[:] for r in SHAPES[kind]], COLORS_BY_KIND[kind])

def random_piece(rng) -> Tetromino:
    """Fresh copy of a catalog piece picked by rng.next_piece()."""
    return Tetromino.of(rng.next_piece())

@dataclass(frozen=True)
class ActivePiece:
    kind: str
    shape: List[List[int]]
    color: str
    x: int
    y: int

    @staticmethod
    def spawn(t: Tetromino, x: int, y: int) -> "ActivePiece":
        return ActivePiece(t.kind, [r[:] for r in t.shape], t.color, x, y)

    @property
    def position(self):
        return self.x, self.y

    def cells(self):
        return [(self.x+c, self.y+r) for r,row in enumerate(self.shape) for c,v in enumerate(row) if v]

# moves: each returns the new piece, or None when the board rejects it

def try_shift(board: Board, piece: ActivePiece, dx: int) -> Optional[ActivePiece]:
    if collides(piece.shape, board, piece.x+dx, piece.y):
        log.debug("shift %+d rejected for %s at %s", dx, piece.kind, piece.position)
        return None
    return replace(piece, x=piece.x+dx)

def try_rotate(board: Board, piece: ActivePiece) -> Optional[ActivePiece]:
    ns = rotate_cw(piece.shape)
    if collides(ns, board, piece.x, piece.y):
        log.debug("rotation rejected for %s at %s", piece.kind, piece.position)
        return None
    return replace(piece, shape=ns)

def try_drop(board: Board, piece: ActivePiece) -> Optional[ActivePiece]:
    """One row down; None means the piece is grounded and should lock."""
    if collides(piece.shape, board, piece.x, piece.y+1):
        return None
    return replace(piece, y=piece.y+1)
