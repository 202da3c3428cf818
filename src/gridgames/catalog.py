"""
Grid Games - Game Catalog
Registry behind the game selector: what can be played and how to start it
"""

from typing import Callable, Dict, List, NamedTuple

from .errors import ConfigurationError
from .minesweeper import MinesweeperGame
from .session import GameSession
from .sudoku import SudokuGame
from .tictactoe import TicTacToeGame


class GameInfo(NamedTuple):
    game_id: str
    title: str
    description: str
    icon: str
    factory: Callable[[], GameSession]


GAMES: Dict[str, GameInfo] = {
    info.game_id: info for info in (
        GameInfo('minesweeper', 'Minesweeper',
                 'Find all the mines without triggering them', '💣', MinesweeperGame),
        GameInfo('sudoku', 'Sudoku',
                 'Fill the grid with numbers 1-9', '🧩', SudokuGame),
        GameInfo('tictactoe', 'Tic-Tac-Toe',
                 'Get a full row, column or diagonal before your opponent', '❌', TicTacToeGame),
    )
}


def available_games() -> List[GameInfo]:
    """Games in selector order"""
    return list(GAMES.values())


def create_game(game_id: str) -> GameSession:
    """
    Create a fresh, unshared session for a game

    Raises:
        ConfigurationError: for an unknown game id
    """
    if game_id not in GAMES:
        raise ConfigurationError(
            f"Unknown game: {game_id}. Use one of {', '.join(GAMES)}")
    return GAMES[game_id].factory()
