
"""
Rendering helpers for the Tetris project.

- Pre-render one cell Surface per piece type and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache the score text; it is re-rendered only when the score sink fires.
- Everything is drawn from a Snapshot, never from the live game objects.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tetris_layout import Dims

# Palette indexed by piece type; 0 is the empty background
PALETTE: Tuple[Tuple[int,int,int], ...] = (
    (0,0,0),
    (255,13,114),   # T
    (13,194,255),   # I
    (255,225,56),   # O
    (245,56,255),   # L
    (255,142,13),   # J
    (13,255,114),   # S
    (56,119,255),   # Z
)

@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.set_score(0)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, PALETTE[0], self.board_rect)
        grid_col = (28,32,48)
        cols, rows = d.board_w // d.cell, d.board_h // d.cell
        for x in range(cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h - 1))
        for y in range(rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w - 1, Y))
        pygame.draw.rect(self.bg, (21,25,53), self.panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), self.panel_rect, 1)
        # game over veil
        self.veil = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        self.veil.fill((0,0,0,178))

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    @property
    def panel_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)

    # ---------- Cell sprites: solid fill with a black outline ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in enumerate(PALETTE):
            if not t: continue
            s = pygame.Surface((c, c))
            s.fill(col)
            pygame.draw.rect(s, (0,0,0), (0,0,c,c), 1)
            self.cell_surf[t] = s

    def cell_rect(self, bx: int, by: int) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x + bx*d.cell, d.board_y + by*d.cell, d.cell, d.cell)

    def draw_cell(self, screen: pygame.Surface, t: int, bx: int, by: int):
        if by < 0: return
        screen.blit(self.cell_surf[t], self.cell_rect(bx, by).topleft)

    # ---------- Score sink ----------
    def set_score(self, score: int):
        if score == self.hud.score: return
        self.hud.score = score
        self.hud.score_s = self.font.render(f"Score: {score}", True, (200,210,240))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(snap.cells):
            for x, t in enumerate(row):
                if t: self.draw_cell(screen, t, x, y)
        for x, y in snap.piece_cells():
            self.draw_cell(screen, snap.piece_type, x, y)
        self.draw_panel_hud(screen)
        if snap.over:
            self.draw_game_over(screen)

    def draw_panel_hud(self, screen: pygame.Surface):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("Enter Restart", True, (165,175,215)),
                f.render("Esc Quit", True, (165,175,215)),
            ]
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        y = d.panel_y + 90
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface):
        r = self.board_rect
        screen.blit(self.veil, r.topleft)
        msg = self.big_font.render("GAME OVER", True, (255,255,255))
        screen.blit(msg, msg.get_rect(center=r.center))
