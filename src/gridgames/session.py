"""
Grid Games - Session Base
Shared session bookkeeping: outcome signal, timer collaborator, lifecycle guards
"""

from enum import Enum
from typing import Optional

from .errors import InvalidActionError
from .timer import GameTimer


class Outcome(Enum):
    """Terminal outcome signal reported alongside every snapshot"""
    NONE = "none"
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class GameSession:
    """
    Base class for the three engines

    A session exclusively owns its grid and its timer collaborator. The
    timer is started and stopped by the engine; ticks come from outside.
    """

    game_id = None

    def __init__(self, timer: Optional[GameTimer] = None):
        self.timer = timer if timer is not None else GameTimer()

    @property
    def outcome(self) -> Outcome:
        raise NotImplementedError

    @property
    def started(self) -> bool:
        """Whether new_game() has loaded a game into this session"""
        return True

    @property
    def is_over(self) -> bool:
        """Check if the session has reached a terminal state"""
        return self.outcome != Outcome.NONE

    @property
    def elapsed(self) -> int:
        return self.timer.elapsed

    @property
    def timer_active(self) -> bool:
        return self.timer.active

    def tick(self) -> bool:
        """
        Translate one periodic timer tick into elapsed time

        Ticks after a terminal transition are dropped even if the timer
        collaborator was restarted externally.
        """
        if self.is_over:
            return False
        return self.timer.tick()

    def snapshot(self):
        raise NotImplementedError

    def _require_started(self):
        if not self.started:
            raise InvalidActionError(f"No {self.game_id} game in progress; call new_game() first")
