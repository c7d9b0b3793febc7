
"""Line clear rewards and the running score"""
import logging
from typing import Callable, Optional

log = logging.getLogger(__name__)

# rows cleared at once -> points; anything else scores 0
LINE_REWARDS = {0: 0, 1: 100, 2: 300, 3: 500, 4: 800}

class Score:
    """Non-negative running total.

    Changes are only recorded here; flush() tells the sink, so the game can
    finish updating its own state before any display code runs.
    """
    def __init__(self, sink: Optional[Callable[[int], None]] = None):
        self.total = 0
        self.sink = sink
        self.reported: Optional[int] = None

    def reset(self):
        self.total = 0
        self.reported = None

    def add(self, points: int):
        self.total += points

    def flush(self):
        """Send the total to the sink if it changed since the last report."""
        if self.total == self.reported: return
        self.reported = self.total
        if self.sink: self.sink(self.total)

def resolve_lines(board, score: Score) -> int:
    """Collapse full rows, credit the reward and return the points added."""
    cleared = board.collapse_full_rows()
    delta = LINE_REWARDS.get(cleared, 0)
    score.add(delta)
    if delta: log.debug("+%d for %d line(s), total %d", delta, cleared, score.total)
    return delta
