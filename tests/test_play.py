"""testing placement invariants over seeded random play"""
import random
import pytest
from tetris_game import Game
from tetris_input import InputMapper, Key
from tetris_piece import COLS, ROWS, SHAPES
from tetris_rng import PieceRandom


def check_state(game):
    """Board keeps its size and ids; the piece stays inside the walls and floor
    and, while the game runs, off every filled cell."""
    assert len(game.board.cells) == ROWS
    for row in game.board.cells:
        assert len(row) == COLS
        assert all(0 <= v < len(SHAPES) for v in row)
    for x, y in game.piece.cells():
        assert 0 <= x < COLS
        assert y < ROWS
        if y >= 0 and not game.over:
            assert game.board.cells[y][x] == 0


@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_random_play_keeps_invariants(seed):
    rnd = random.Random(seed)
    game = Game(PieceRandom(seed), drop_interval=1000)
    mapper = InputMapper(game)
    keys = list(Key)
    now = 0
    check_state(game)
    for _ in range(4000):
        if rnd.random() < 0.6:
            mapper.handle(rnd.choice(keys))
        else:
            now += rnd.choice((16, 250, 1001))
            game.tick(now)
        check_state(game)
        if game.over:
            break

    if game.over:
        cells = [r[:] for r in game.board.cells]
        piece = (game.piece.x, game.piece.y, game.piece.shape)
        for key in keys:
            assert mapper.handle(key) is False
        game.tick(now + 5000)
        assert game.board.cells == cells
        assert (game.piece.x, game.piece.y, game.piece.shape) == piece


@pytest.mark.parametrize("seed", [3, 11])
def test_gravity_only_play_ends_in_game_over(seed):
    """With no input every piece stacks in the middle until the spawn is blocked."""
    game = Game(PieceRandom(seed), drop_interval=1000)
    now = 0
    for _ in range(ROWS * 25 * 2):
        now += 1001
        game.tick(now)
        check_state(game)
        if game.over:
            break
    assert game.over
