"""testing drawing a snapshot onto a pygame Surface"""
import pygame
import pytest
from tetris_game import Phase
from tetris_layout import compute_dims
from tetris_piece import COLS, ROWS
from tetris_render import PALETTE, RenderAssets

O, I = 3, 2


@pytest.fixture(scope="module")
def assets():
    pygame.font.init()
    dims = compute_dims(cell=10)
    return RenderAssets(dims, pygame.font.Font(None, 20), pygame.font.Font(None, 32))


@pytest.fixture
def screen(assets):
    return pygame.Surface((assets.dims.total_w, assets.dims.total_h))


def center(assets, x, y):
    return assets.cell_rect(x, y).center


def rgb(screen, pos):
    return tuple(screen.get_at(pos))[:3]


class TestLayout:
    def test_board_area(self):
        d = compute_dims(cell=30)
        assert (d.board_w, d.board_h) == (COLS * 30, ROWS * 30)
        assert d.total_w > d.board_w and d.panel_x > d.board_x + d.board_w - 1


class TestRenderAssets:
    """Tests for RenderAssets.draw."""

    def test_palette(self):
        assert len(PALETTE) == 8
        assert PALETTE[0] == (0, 0, 0)
        assert len(set(PALETTE)) == 8

    def test_draws_board_and_piece(self, make_game, assets, screen):
        g = make_game(O)
        g.board.cells[19][0] = I
        snap = g.snapshot()
        assets.draw(screen, snap)
        assert rgb(screen, center(assets, 0, 19)) == PALETTE[I]
        assert rgb(screen, center(assets, 4, 0)) == PALETTE[O]
        assert rgb(screen, center(assets, 9, 10)) == PALETTE[0]

    def test_cells_above_board_are_skipped(self, make_game, assets, screen):
        g = make_game(O)
        g.piece.y = -1
        assets.draw(screen, g.snapshot())
        assert rgb(screen, center(assets, 4, 0)) == PALETTE[O]

    def test_game_over_veil(self, make_game, assets, screen):
        g = make_game(O)
        g.board.cells[19][0] = I
        g.board.cells[1][4] = 1
        g.spawn()
        snap = g.snapshot()
        assert snap.phase is Phase.GAME_OVER
        assets.draw(screen, snap)
        dimmed = rgb(screen, center(assets, 0, 19))
        assert dimmed != PALETTE[I]
        assert all(a <= b for a, b in zip(dimmed, PALETTE[I]))

    def test_score_sink_updates_hud(self, assets):
        assets.set_score(300)
        assert assets.hud.score == 300
        s = assets.hud.score_s
        assets.set_score(300)
        assert assets.hud.score_s is s
