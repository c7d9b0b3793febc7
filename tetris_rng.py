
"""Piece type sources"""
import random
from typing import Iterable, Optional
from tetris_piece import SHAPES

class PieceRandom:
    """Uniform choice over the catalog types 1..7."""
    PIECES = tuple(range(1, len(SHAPES)))

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> int:
        return self._rng.choice(self.PIECES)

class SequenceRandom:
    """Replays a fixed list of piece types, cycling when it runs out."""
    def __init__(self, pieces: Iterable[int]):
        self.pieces = list(pieces)
        if not self.pieces: raise ValueError("empty piece sequence")
        for t in self.pieces:
            if t not in PieceRandom.PIECES: raise ValueError(f"unknown piece type {t!r}")
        self.i = 0

    def next_piece(self) -> int:
        t = self.pieces[self.i % len(self.pieces)]
        self.i += 1
        return t
