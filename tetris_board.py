
"""Board grid and helpers: placement check, lock, row collapse"""
import logging
from typing import List, Tuple
from tetris_piece import Piece, Shape, COLS, ROWS

log = logging.getLogger(__name__)

class Board:
    """ROWS x COLS grid; 0 is empty, 1..7 is the type of the piece locked there.

    Resetting the board also resets the score attached to it.
    """
    def __init__(self, rows: int = ROWS, cols: int = COLS, score=None):
        self.rows, self.cols = rows, cols
        self.score = score
        self.cells: List[List[int]] = []
        self.reset()

    def reset(self):
        self.cells = [[0]*self.cols for _ in range(self.rows)]
        if self.score is not None: self.score.reset()

    def _check(self, col: int, row: int):
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise IndexError(f"cell ({col},{row}) outside {self.cols}x{self.rows} board")

    def is_occupied(self, col: int, row: int) -> bool:
        self._check(col, row)
        return self.cells[row][col] != 0

    def lock(self, piece: Piece):
        """Write the piece type into every cell it covers. The placement is not re-validated."""
        cells = list(piece.cells())
        for x,y in cells: self._check(x, y)
        for x,y in cells: self.cells[y][x] = piece.t
        log.debug("locked %s at (%d,%d)", piece.name, piece.x, piece.y)

    def collapse_full_rows(self) -> int:
        c=0; y=self.rows-1
        while y>=0:
            if all(self.cells[y]):
                del self.cells[y]; self.cells.insert(0,[0]*self.cols); c+=1
            else: y-=1
        if c: log.debug("cleared %d row(s)", c)
        return c

    def rows_view(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(r) for r in self.cells)

def is_valid_placement(board: Board, x: int, y: int, shape: Shape) -> bool:
    """True when every occupied cell of shape at (x,y) is inside the walls and floor
    and not on a filled cell. Cells above row 0 only get the wall check."""
    for r,row in enumerate(shape):
        for c,v in enumerate(row):
            if not v: continue
            nx,ny = x+c, y+r
            if nx<0 or nx>=board.cols or ny>=board.rows: return False
            if ny>=0 and board.cells[ny][nx]: return False
    return True
