import pytest
from tetris_board import Board
from tetris_game import Game
from tetris_rng import SequenceRandom


@pytest.fixture
def board():
    """Returns a new, empty 20x10 Board for each test."""
    return Board()


@pytest.fixture
def make_game():
    """Factory for a Game fed a fixed piece sequence (default: O pieces) and a 1000 ms drop interval."""
    def _make(*pieces, sink=None):
        return Game(SequenceRandom(pieces or (3,)), drop_interval=1000, score_sink=sink)
    return _make
