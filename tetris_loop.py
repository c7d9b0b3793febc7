
"""Frame scheduler: input -> tick -> render, driven by a pluggable clock"""
import logging
from typing import Callable, Iterable, Optional
from tetris_input import InputMapper

log = logging.getLogger(__name__)

class ManualClock:
    """Clock for headless runs; time only moves when advance() is called."""
    def __init__(self, start: float = 0):
        self.now = start
    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now
    def __call__(self) -> float: return self.now

class FrameLoop:
    """Runs one frame per step(). poll_input returns the key events queued since the last frame."""
    def __init__(self, game, clock: Callable[[], float], render: Callable,
                 poll_input: Optional[Callable[[], Iterable]] = None):
        self.game = game
        self.clock = clock
        self.render = render
        self.poll_input = poll_input
        self.mapper = InputMapper(game)
        self.frames = 0

    def step(self) -> bool:
        if self.poll_input:
            for key in self.poll_input(): self.mapper.handle(key)
        self.game.tick(self.clock())
        self.render(self.game.snapshot())
        self.frames += 1
        return not self.game.over

    def run(self, max_frames: Optional[int] = None, until: Optional[Callable[[], bool]] = None) -> int:
        """Step until `until()` holds (default: game over) or max_frames ran. Returns frames run."""
        stop = until or (lambda: self.game.over)
        n = 0
        while max_frames is None or n < max_frames:
            self.step(); n += 1
            if stop(): break
        log.debug("loop stopped after %d frame(s)", n)
        return n
