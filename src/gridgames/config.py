"""
Grid Games - Configuration
Fixed option ranges and defaults for each game
"""

from .errors import ConfigurationError


# Minesweeper
MIN_SIZE = 5
MAX_SIZE = 20
MINE_DENSITY_PERCENT = 35
DEFAULT_SIZE = 10
DEFAULT_MINE_COUNT = 15
SAFE_OPENING_CELLS = 9  # clicked cell plus its 8 neighbours

# Sudoku
SUDOKU_SIZE = 9
BOX_SIZE = 3
DIFFICULTIES = ('easy', 'medium', 'hard')
DEFAULT_DIFFICULTY = 'easy'

# Tic-Tac-Toe
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 5
DEFAULT_BOARD_SIZE = 3

# Timer
TICK_SECONDS = 1
MAX_DISPLAY_SECONDS = 99 * 60 + 59


def max_mine_count(size: int) -> int:
    """Upper bound of the mine slider: floor(size^2 * 0.35)"""
    return size * size * MINE_DENSITY_PERCENT // 100


def validate_minesweeper(size: int, mine_count: int):
    """Check a Minesweeper configuration, raising ConfigurationError if invalid"""
    if not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
        raise ConfigurationError(
            f"Invalid size: {size}. Must be between {MIN_SIZE} and {MAX_SIZE}.")

    upper = max_mine_count(size)
    if not isinstance(mine_count, int) or not 1 <= mine_count <= upper:
        raise ConfigurationError(
            f"Invalid mine count: {mine_count}. Must be between 1 and {upper} for size {size}.")

    # The safe opening must always leave room for every mine
    if mine_count > size * size - SAFE_OPENING_CELLS:
        raise ConfigurationError(
            f"Cannot place {mine_count} mines on a {size}x{size} board with a safe opening")


def validate_difficulty(difficulty: str):
    """Check a Sudoku difficulty tier"""
    if difficulty not in DIFFICULTIES:
        raise ConfigurationError(
            f"Invalid difficulty: {difficulty}. Must be one of {', '.join(DIFFICULTIES)}.")


def validate_tictactoe_size(size: int):
    """Check a Tic-Tac-Toe board size"""
    if not isinstance(size, int) or not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise ConfigurationError(
            f"Invalid board size: {size}. Must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}.")
