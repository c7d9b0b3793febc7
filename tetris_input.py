
"""Key events -> piece controller commands"""
from enum import Enum
from typing import Optional
import pygame

class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"

PYGAME_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}

def key_from_pygame(keycode) -> Optional[Key]: return PYGAME_KEYS.get(keycode)

class InputMapper:
    """One key-down event -> at most one controller call. Ignored once the game is over."""
    def __init__(self, game):
        self.game = game

    def handle(self, key) -> bool:
        if self.game.over: return False
        try: key = Key(key)
        except ValueError: return False
        g = self.game
        if key is Key.LEFT: return g.move(-1, 0)
        if key is Key.RIGHT: return g.move(1, 0)
        if key is Key.DOWN: return g.soft_drop()
        return g.rotate()
