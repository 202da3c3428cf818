"""
Grid Games - Error Types
Exceptions raised by the puzzle engines
"""


class GridGameError(Exception):
    """Base class for all grid game errors"""


class BoundsError(GridGameError, IndexError):
    """Raised when a (row, col) address falls outside the grid"""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"Invalid coordinates: ({row}, {col}) on a {rows}x{cols} grid")
        self.row = row
        self.col = col


class InvalidActionError(GridGameError):
    """Raised when an action breaks the engine's calling contract"""


class ConfigurationError(GridGameError, ValueError):
    """Raised by new_game() for an invalid size, mine count or difficulty"""
