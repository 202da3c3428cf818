"""
Grid Games - Game Timer
Elapsed-time bookkeeping gated by an active flag, plus a wall-clock tick source
"""

import time
from typing import Callable

from .config import MAX_DISPLAY_SECONDS, TICK_SECONDS


class GameTimer:
    """Counts whole seconds while active; ticks arriving while stopped are ignored"""

    def __init__(self):
        self.elapsed = 0
        self.active = False

    def start(self):
        self.active = True

    def stop(self):
        self.active = False

    def reset(self):
        """Stop the timer and zero the elapsed time"""
        self.elapsed = 0
        self.active = False

    def tick(self) -> bool:
        """
        Advance by one second if active

        Returns:
            True if the tick was counted
        """
        if not self.active:
            return False
        self.elapsed += 1
        return True


def format_time(seconds: int) -> str:
    """Format time as MM:SS"""
    seconds = max(0, min(int(seconds), MAX_DISPLAY_SECONDS))
    minutes = seconds // 60
    seconds = seconds % 60
    return f"{minutes:02d}:{seconds:02d}"


class WallClockTicker:
    """
    Periodic tick source for front-ends without an event loop timer

    Each call to pump() delivers one tick() to the target for every whole
    TICK_SECONDS interval that passed since the previous delivery, so no
    second is lost between pumps.
    """

    def __init__(self, target, clock: Callable[[], float] = time.monotonic):
        self.target = target
        self.clock = clock
        self._last = clock()

    def restart(self):
        """Forget time accumulated so far, e.g. when a new game begins"""
        self._last = self.clock()

    def pump(self) -> int:
        """
        Deliver pending ticks to the target

        Returns:
            Number of ticks delivered
        """
        now = self.clock()
        pending = int((now - self._last) // TICK_SECONDS)
        for _ in range(pending):
            self.target.tick()
        self._last += pending * TICK_SECONDS
        return pending
