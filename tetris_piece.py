
"""Piece model, shape catalog, rotation with horizontal kick"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

log = logging.getLogger(__name__)

COLS, ROWS = 10, 20

Shape = Tuple[Tuple[int, ...], ...]

# index 0 is the empty cell; 1..7 double as color keys
NAMES = ("", "T", "I", "O", "L", "J", "S", "Z")

SHAPES: Tuple[Shape, ...] = (
    (),
    ((0,1,0),(1,1,1),(0,0,0)),
    ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
    ((1,1),(1,1)),
    ((0,0,1),(1,1,1),(0,0,0)),
    ((1,0,0),(1,1,1),(0,0,0)),
    ((0,1,1),(1,1,0),(0,0,0)),
    ((1,1,0),(0,1,1),(0,0,0)),
)

# column offsets tried in order after a rotation
KICKS = (0, 1, -1)

def rotate_cw(m: Shape) -> Shape: return tuple(zip(*m[::-1]))

@dataclass
class Piece:
    t: int
    shape: Shape
    x: int
    y: int

    def __post_init__(self):
        if not 1 <= self.t < len(SHAPES):
            raise ValueError(f"unknown piece type {self.t!r}")

    @property
    def name(self) -> str: return NAMES[self.t]

    def cells(self):
        for r,row in enumerate(self.shape):
            for c,v in enumerate(row):
                if v: yield self.x+c, self.y+r

    @staticmethod
    def spawn(t: int, cols: int = COLS):
        s = SHAPES[t] if 0 < t < len(SHAPES) else ()
        return Piece(t, s, (cols - len(s[0]))//2 if s else 0, 0)

# controller

def try_move(board, piece: Piece, dx: int, dy: int) -> bool:
    from tetris_board import is_valid_placement
    nx, ny = piece.x+dx, piece.y+dy
    if not is_valid_placement(board, nx, ny, piece.shape): return False
    piece.x, piece.y = nx, ny
    return True

def find_kick(board, piece: Piece) -> Optional[int]:
    """Column offset at which the clockwise rotation fits, or None."""
    from tetris_board import is_valid_placement
    ns = rotate_cw(piece.shape)
    for dx in KICKS:
        if is_valid_placement(board, piece.x+dx, piece.y, ns): return dx
    return None

def rotate(board, piece: Piece) -> bool:
    """Rotate clockwise in place; shape and origin change together or not at all."""
    dx = find_kick(board, piece)
    if dx is None: return False
    if dx: log.debug("kick %+d for %s", dx, piece.name)
    piece.shape = rotate_cw(piece.shape)
    piece.x += dx
    return True
