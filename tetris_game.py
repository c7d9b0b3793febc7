
"""
Game state and gravity scheduling.

A Game owns everything one run needs: the board, the score, the active piece,
the phase and the drop counter. Nothing lives at module level, so several
games can run side by side and tests can build one with a fixed piece
sequence.

Each call to tick() is one animation frame:

  • GAME_OVER: nothing moves; the frame is for rendering only.
  • RUNNING: the elapsed time is added to the drop counter. Once the counter
    passes the drop interval the piece falls one row, or, if it cannot,
    it is locked, full rows are cleared and scored, and the next piece
    spawns (which may end the game). The counter then starts over.

Rendering never sees the live objects, only the frozen Snapshot.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from tetris_config import CONFIG
from tetris_board import Board, is_valid_placement
from tetris_piece import COLS, ROWS, Piece, Shape, rotate, try_move
from tetris_rng import PieceRandom
from tetris_score import Score, resolve_lines

log = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to the render sink."""
    cells: Tuple[Tuple[int, ...], ...]
    piece_type: int
    shape: Shape
    x: int
    y: int
    phase: Phase
    score: int

    @property
    def over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def piece_cells(self):
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r


class Game:
    def __init__(self, rng=None, drop_interval: Optional[float] = None,
                 rows: int = ROWS, cols: int = COLS,
                 score_sink: Optional[Callable[[int], None]] = None):
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.drop_interval = CONFIG["DROP_INTERVAL_MS"] if drop_interval is None else drop_interval
        self.score = Score(score_sink)
        self.board = Board(rows, cols, self.score)
        self.piece: Optional[Piece] = None
        self.reset()

    def reset(self, now: float = 0) -> None:
        """Start a new run: empty board, zero score, fresh piece.

        `now` is the clock value the first tick's delta is measured from.
        """
        self.board.reset()
        self.phase = Phase.RUNNING
        self.drop_counter = 0.0
        self.last_time = now
        self.spawn()
        log.info("new game")
        self.score.flush()

    @property
    def over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def spawn(self) -> bool:
        """Bring in the next piece at the top center. Ends the game if it does not fit."""
        self.piece = Piece.spawn(self.rng.next_piece(), self.board.cols)
        ok = is_valid_placement(self.board, self.piece.x, self.piece.y, self.piece.shape)
        log.debug("spawn %s at (%d,%d)", self.piece.name, self.piece.x, self.piece.y)
        if not ok:
            self.phase = Phase.GAME_OVER
            log.info("game over, score %d", self.score.total)
        return ok

    # --- controller commands ---
    def move(self, dx: int, dy: int) -> bool:
        return try_move(self.board, self.piece, dx, dy)

    def rotate(self) -> bool:
        return rotate(self.board, self.piece)

    def soft_drop(self) -> bool:
        """One row down; a successful step restarts the gravity timer."""
        if not self.move(0, 1):
            return False
        self.drop_counter = 0.0
        return True

    def lock_piece(self) -> int:
        """Merge the piece into the board, clear rows, spawn the next one.

        The score sink hears about new points only after all of that is done.
        Returns the points earned by the lock.
        """
        self.board.lock(self.piece)
        delta = resolve_lines(self.board, self.score)
        self.spawn()
        self.score.flush()
        return delta

    # --- scheduling ---
    def tick(self, now: float) -> bool:
        """Advance gravity to clock value `now`. Returns True if a gravity step ran."""
        if self.over:
            self.last_time = now
            return False
        delta = now - self.last_time
        self.last_time = now
        self.drop_counter += delta
        if self.drop_counter <= self.drop_interval:
            return False
        moved = self.move(0, 1)
        self.drop_counter = 0.0
        if not moved:
            self.lock_piece()
        return True

    def snapshot(self) -> Snapshot:
        p = self.piece
        return Snapshot(self.board.rows_view(), p.t, p.shape, p.x, p.y,
                        self.phase, self.score.total)
