"""
Grid Games package initialization
"""

from .errors import GridGameError, BoundsError, InvalidActionError, ConfigurationError
from .grid import Grid
from .timer import GameTimer, WallClockTicker, format_time
from .session import GameSession, Outcome
from .minesweeper import MinesweeperGame
from .sudoku import SudokuGame, SudokuCell
from .tictactoe import TicTacToeGame, Mark
from .api import GameAPI, Action
from .catalog import available_games, create_game

__all__ = [
    'GridGameError', 'BoundsError', 'InvalidActionError', 'ConfigurationError',
    'Grid',
    'GameTimer', 'WallClockTicker', 'format_time',
    'GameSession', 'Outcome',
    'MinesweeperGame',
    'SudokuGame', 'SudokuCell',
    'TicTacToeGame', 'Mark',
    'GameAPI', 'Action',
    'available_games', 'create_game',
]
