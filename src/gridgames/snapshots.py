"""
Grid Games - State Snapshots
Immutable views of a session handed to the presentation layer after every action
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

import numpy as np

from .session import Outcome


Position = Tuple[int, int]

# Visible board encoding shared with board_array()
HIDDEN_CODE = -3
FLAG_CODE = -2
MINE_CODE = -1


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class MineCellView:
    """One Minesweeper cell as the player's board shows it"""
    revealed: bool
    has_mine: bool
    flagged: bool
    adjacent_mines: int

    def visible_code(self) -> int:
        """-3=hidden, -2=flag, -1=mine, 0-8=adjacent count"""
        if self.revealed:
            return MINE_CODE if self.has_mine else self.adjacent_mines
        if self.flagged:
            return FLAG_CODE
        return HIDDEN_CODE


@dataclass(frozen=True)
class MinesweeperSnapshot:
    size: int
    mine_count: int
    state: Enum
    outcome: Outcome
    flags_used: int
    cells: Tuple[Tuple[MineCellView, ...], ...]
    elapsed: int
    timer_active: bool
    clicked_mine: Optional[Position] = None

    @property
    def remaining_mines(self) -> int:
        """Get the number of remaining mines (total mines - flags used)"""
        return max(0, self.mine_count - self.flags_used)

    def cell(self, row: int, col: int) -> MineCellView:
        return self.cells[row][col]

    def board_array(self) -> np.ndarray:
        """
        Get the visible board as a read-only numpy array

        Returns:
            2D int8 array (-3=hidden, -2=flag, -1=mine, 0-8=numbers)
        """
        visible = np.array([[cell.visible_code() for cell in row] for row in self.cells],
                           dtype=np.int8).reshape(len(self.cells), len(self.cells))
        return _read_only(visible)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game': 'minesweeper',
            'board_size': (self.size, self.size),
            'total_mines': self.mine_count,
            'game_state': self.state.value,
            'outcome': self.outcome.value,
            'flags_used': self.flags_used,
            'remaining_mines': self.remaining_mines,
            'visible_board': self.board_array().tolist(),
            'clicked_mine': self.clicked_mine,
            'elapsed': self.elapsed,
            'timer_active': self.timer_active,
            'is_game_over': self.outcome != Outcome.NONE,
        }


@dataclass(frozen=True)
class SudokuCellView:
    value: Optional[int]
    is_fixed: bool
    is_invalid: bool
    notes: FrozenSet[int] = frozenset()


@dataclass(frozen=True)
class SudokuSnapshot:
    difficulty: Optional[str]
    state: Enum
    outcome: Outcome
    cells: Tuple[Tuple[SudokuCellView, ...], ...]
    mistakes: int
    elapsed: int
    timer_active: bool
    selected: Optional[Position] = None
    highlighted: FrozenSet[Position] = frozenset()
    note_mode: bool = False
    celebrate: bool = False

    @property
    def is_complete(self) -> bool:
        return self.outcome == Outcome.WIN

    def cell(self, row: int, col: int) -> SudokuCellView:
        return self.cells[row][col]

    def board_array(self) -> np.ndarray:
        """Values as a read-only 2D int8 array, 0 for empty cells"""
        values = np.array([[cell.value or 0 for cell in row] for row in self.cells],
                          dtype=np.int8)
        return _read_only(values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game': 'sudoku',
            'difficulty': self.difficulty,
            'game_state': self.state.value,
            'outcome': self.outcome.value,
            'values': self.board_array().tolist(),
            'fixed': [[cell.is_fixed for cell in row] for row in self.cells],
            'invalid': [[cell.is_invalid for cell in row] for row in self.cells],
            'notes': [[sorted(cell.notes) for cell in row] for row in self.cells],
            'mistakes': self.mistakes,
            'selected': self.selected,
            'highlighted': sorted(self.highlighted),
            'note_mode': self.note_mode,
            'celebrate': self.celebrate,
            'elapsed': self.elapsed,
            'timer_active': self.timer_active,
            'is_game_over': self.outcome != Outcome.NONE,
        }


@dataclass(frozen=True)
class Scores:
    """Win/draw tally kept across Tic-Tac-Toe games"""
    x: int = 0
    o: int = 0
    draws: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'X': self.x, 'O': self.o, 'draws': self.draws}


@dataclass(frozen=True)
class TicTacToeSnapshot:
    size: int
    board: Tuple[Tuple[Optional[str], ...], ...]
    current_player: str
    state: Enum
    outcome: Outcome
    winner: Optional[str]
    move_count: int
    elapsed: int
    timer_active: bool
    scores: Scores = field(default_factory=Scores)

    @property
    def size_locked(self) -> bool:
        """The size control is disabled once a mark is on the board"""
        return self.move_count > 0

    def board_array(self) -> np.ndarray:
        """Marks as a read-only 2D int8 array: 1=X, -1=O, 0=empty"""
        encoded = np.zeros((self.size, self.size), dtype=np.int8)
        for row, marks in enumerate(self.board):
            for col, mark in enumerate(marks):
                if mark == 'X':
                    encoded[row, col] = 1
                elif mark == 'O':
                    encoded[row, col] = -1
        return _read_only(encoded)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game': 'tictactoe',
            'board_size': (self.size, self.size),
            'board': [list(row) for row in self.board],
            'current_player': self.current_player,
            'game_state': self.state.value,
            'outcome': self.outcome.value,
            'winner': self.winner,
            'move_count': self.move_count,
            'scores': self.scores.to_dict(),
            'elapsed': self.elapsed,
            'timer_active': self.timer_active,
            'is_game_over': self.outcome != Outcome.NONE,
        }
