"""
Sudoku - Puzzle Table
Pre-authored 9x9 templates, one per difficulty tier (0 = empty cell)
"""

from typing import List, Tuple

from .config import validate_difficulty


Template = Tuple[Tuple[int, ...], ...]

PUZZLES = {
    'easy': (
        (5, 3, 0, 0, 7, 0, 0, 0, 0),
        (6, 0, 0, 1, 9, 5, 0, 0, 0),
        (0, 9, 8, 0, 0, 0, 0, 6, 0),
        (8, 0, 0, 0, 6, 0, 0, 0, 3),
        (4, 0, 0, 8, 0, 3, 0, 0, 1),
        (7, 0, 0, 0, 2, 0, 0, 0, 6),
        (0, 6, 0, 0, 0, 0, 2, 8, 0),
        (0, 0, 0, 4, 1, 9, 0, 0, 5),
        (0, 0, 0, 0, 8, 0, 0, 7, 9),
    ),
    'medium': (
        (0, 0, 0, 6, 0, 0, 4, 0, 0),
        (7, 0, 0, 0, 0, 3, 6, 0, 0),
        (0, 0, 0, 0, 9, 1, 0, 8, 0),
        (0, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 5, 0, 1, 8, 0, 0, 0, 3),
        (0, 0, 0, 3, 0, 6, 0, 4, 5),
        (0, 4, 0, 2, 0, 0, 0, 6, 0),
        (9, 0, 3, 0, 0, 0, 0, 0, 0),
        (0, 2, 0, 0, 0, 0, 1, 0, 0),
    ),
    'hard': (
        (8, 0, 0, 0, 0, 0, 0, 0, 0),
        (0, 0, 3, 6, 0, 0, 0, 0, 0),
        (0, 7, 0, 0, 9, 0, 2, 0, 0),
        (0, 5, 0, 0, 0, 7, 0, 0, 0),
        (0, 0, 0, 0, 4, 5, 7, 0, 0),
        (0, 0, 0, 1, 0, 0, 0, 3, 0),
        (0, 0, 1, 0, 0, 0, 0, 6, 8),
        (0, 0, 8, 5, 0, 0, 0, 1, 0),
        (0, 9, 0, 0, 0, 0, 4, 0, 0),
    ),
}


def get_puzzle(difficulty: str) -> List[List[int]]:
    """Return a fresh, mutable copy of the template for a difficulty"""
    validate_difficulty(difficulty)
    return [list(row) for row in PUZZLES[difficulty]]
