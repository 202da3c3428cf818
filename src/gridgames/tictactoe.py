"""
Tic-Tac-Toe - Core Game Logic
N x N rules and state: turn alternation, line/diagonal win detection and scoring
"""

import logging
from enum import Enum
from typing import Optional

from . import config
from .errors import InvalidActionError
from .grid import Grid
from .session import GameSession, Outcome
from .snapshots import Scores, TicTacToeSnapshot


logger = logging.getLogger(__name__)


class Mark(str, Enum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> 'Mark':
        return Mark.O if self is Mark.X else Mark.X


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


class TicTacToeGame(GameSession):
    """
    tic-tac-toe rules and state for a configurable board size

    Scores accumulate across new_game() calls and are only cleared by
    reset_scores().
    """

    game_id = 'tictactoe'

    def __init__(self, size: int = config.DEFAULT_BOARD_SIZE, timer=None):
        super().__init__(timer)
        self.scores = Scores()
        self.new_game(size)

    @property
    def outcome(self) -> Outcome:
        if self.game_state == GameState.WON:
            return Outcome.WIN
        if self.game_state == GameState.DRAW:
            return Outcome.DRAW
        return Outcome.NONE

    def new_game(self, size: Optional[int] = None) -> TicTacToeSnapshot:
        """
        Clear the board and start a new game, keeping the scores

        Args:
            size: New board size, or None to keep the current one

        Raises:
            ConfigurationError: for a size outside the allowed range
        """
        size = self.board_size if size is None else size
        config.validate_tictactoe_size(size)

        self.board_size = size
        self.board: Grid[Optional[Mark]] = Grid(size, size, lambda row, col: None)
        self.current_player = Mark.X
        self.game_state = GameState.PLAYING
        self.winner: Optional[Mark] = None
        self.move_count = 0
        self.timer.reset()
        self.timer.start()

        logger.info("New tic-tac-toe game on a %dx%d board", size, size)
        return self.snapshot()

    def resize(self, size: int) -> TicTacToeSnapshot:
        """
        Change the board size of a game that has no marks yet

        Raises:
            InvalidActionError: once any mark has been placed this game
            ConfigurationError: for a size outside the allowed range
        """
        if self.move_count > 0:
            raise InvalidActionError("Board size is locked once a mark has been placed")
        return self.new_game(size)

    def is_cell_empty(self, row: int, col: int) -> bool:
        return self.board.cell(row, col) is None

    def place(self, row: int, col: int) -> TicTacToeSnapshot:
        """
        Place the current player's mark and evaluate the result

        No-op when the game is over or the cell is occupied.
        """
        if not self.is_cell_empty(row, col) or self.is_over:
            return self.snapshot()

        player = self.current_player
        self.board.set(row, col, player)
        self.move_count += 1

        if self.check_win(player):
            self.winner = player
            self._finish(GameState.WON)
            if player is Mark.X:
                self.scores = Scores(self.scores.x + 1, self.scores.o, self.scores.draws)
            else:
                self.scores = Scores(self.scores.x, self.scores.o + 1, self.scores.draws)
        elif self.check_draw():
            self._finish(GameState.DRAW)
            self.scores = Scores(self.scores.x, self.scores.o, self.scores.draws + 1)
        else:
            self.current_player = player.opponent

        return self.snapshot()

    def check_win(self, player: Mark) -> bool:
        """Scan every row, column and both full diagonals for an unbroken line"""
        return any(all(self.board.cell(r, c) is player for r, c in line)
                   for line in self.board.lines())

    def check_draw(self) -> bool:
        """Full board and not already won"""
        return self.move_count == self.board_size * self.board_size and self.winner is None

    def reset_scores(self) -> TicTacToeSnapshot:
        self.scores = Scores()
        return self.snapshot()

    def _finish(self, state: GameState):
        self.game_state = state
        self.timer.stop()
        logger.info("Tic-tac-toe game ended: %s (winner=%s)", state.value,
                    self.winner.value if self.winner else None)

    def snapshot(self) -> TicTacToeSnapshot:
        """Immutable view of the current session"""
        board = tuple(
            tuple(mark.value if mark else None for mark in self.board.row_cells(row))
            for row in range(self.board_size)
        )
        return TicTacToeSnapshot(
            size=self.board_size,
            board=board,
            current_player=self.current_player.value,
            state=self.game_state,
            outcome=self.outcome,
            winner=self.winner.value if self.winner else None,
            move_count=self.move_count,
            elapsed=self.timer.elapsed,
            timer_active=self.timer.active,
            scores=self.scores,
        )
