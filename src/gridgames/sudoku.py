"""
Sudoku - Core Game Logic
Puzzle seeding from the fixed table, placement validation, notes and completion detection
"""

import logging
from enum import Enum
from typing import FrozenSet, Optional, Set, Tuple

from . import config
from .errors import InvalidActionError
from .grid import Grid
from .puzzles import get_puzzle
from .session import GameSession, Outcome
from .snapshots import SudokuCellView, SudokuSnapshot


logger = logging.getLogger(__name__)

DIGITS = range(1, config.SUDOKU_SIZE + 1)


def is_digit(value) -> bool:
    """Whole numbers 1-9 only; bools and floats are rejected"""
    return isinstance(value, int) and not isinstance(value, bool) and value in DIGITS


class GameState(Enum):
    READY = "ready"  # no puzzle loaded yet
    PLAYING = "playing"
    COMPLETE = "complete"


class SudokuCell:
    """A single Sudoku square; a set value and pencil notes never coexist"""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.value: Optional[int] = None
        self.is_fixed = False
        self.is_invalid = False
        self.notes: Set[int] = set()

    def fix(self, value: int):
        """Seed a given from the puzzle template"""
        self.value = value
        self.is_fixed = True

    def set_value(self, value: int):
        self.value = value
        self.notes = set()

    def toggle_note(self, value: int):
        if value in self.notes:
            self.notes.discard(value)
        else:
            self.notes.add(value)
        self.value = None
        self.is_invalid = False

    def clear(self):
        self.value = None
        self.notes = set()
        self.is_invalid = False

    def view(self) -> SudokuCellView:
        return SudokuCellView(
            value=self.value,
            is_fixed=self.is_fixed,
            is_invalid=self.is_invalid,
            notes=frozenset(self.notes),
        )


class SudokuGame(GameSession):
    """
    One Sudoku session over a 9x9 grid

    Mistakes are counted but never end the game; the only terminal state is
    a completely and consistently filled grid.
    """

    game_id = 'sudoku'

    def __init__(self, timer=None):
        super().__init__(timer)
        self.difficulty: Optional[str] = None
        self.board: Optional[Grid[SudokuCell]] = None
        self.game_state = GameState.READY
        self.mistakes = 0
        self.selected: Optional[Tuple[int, int]] = None
        self.note_mode = False

    @property
    def started(self) -> bool:
        return self.game_state != GameState.READY

    @property
    def outcome(self) -> Outcome:
        return Outcome.WIN if self.game_state == GameState.COMPLETE else Outcome.NONE

    def new_game(self, difficulty: str = config.DEFAULT_DIFFICULTY) -> SudokuSnapshot:
        """
        Load the fixed template for a difficulty and start the timer

        Raises:
            ConfigurationError: for an unknown difficulty; the current
                session is left untouched
        """
        puzzle = get_puzzle(difficulty)

        board = Grid(config.SUDOKU_SIZE, config.SUDOKU_SIZE, SudokuCell)
        for row, col in board.positions():
            if puzzle[row][col] != 0:
                board.cell(row, col).fix(puzzle[row][col])

        self.difficulty = difficulty
        self.board = board
        self.game_state = GameState.PLAYING
        self.mistakes = 0
        self.selected = None
        self.note_mode = False
        self.timer.reset()
        self.timer.start()

        logger.info("New sudoku game (%s)", difficulty)
        return self.snapshot()

    def get_cell(self, row: int, col: int) -> SudokuCell:
        self._require_started()
        return self.board.cell(row, col)

    def _editable_cell(self, row: int, col: int, value: Optional[int] = None) -> Optional[SudokuCell]:
        """Look up a cell for writing; None when the write must be ignored"""
        self._require_started()
        cell = self.board.cell(row, col)
        if cell.is_fixed or self.is_over:
            return None
        if value is not None and not is_digit(value):
            raise InvalidActionError(f"Invalid digit: {value!r}. Must be an integer between 1 and 9.")
        return cell

    def is_valid_placement(self, row: int, col: int, value: int) -> bool:
        """Check that no other cell in the same row, column or box already holds value"""
        return all(self.board.cell(r, c).value != value
                   for r, c in self.board.peer_positions(row, col, config.BOX_SIZE))

    def set_value(self, row: int, col: int, value: int) -> SudokuSnapshot:
        """
        Write a digit, clear the cell's notes and validate the placement

        An invalid placement is marked and counted as a mistake but kept on
        the board.
        """
        cell = self._editable_cell(row, col, value)
        if cell is None:
            return self.snapshot()

        cell.set_value(value)
        cell.is_invalid = not self.is_valid_placement(row, col, value)
        if cell.is_invalid:
            self.mistakes += 1
            logger.debug("Conflicting %d at (%d, %d), mistakes=%d", value, row, col, self.mistakes)

        completed = self._check_completion()
        return self.snapshot(celebrate=completed)

    def toggle_note(self, row: int, col: int, value: int) -> SudokuSnapshot:
        """Add or remove a pencil note; any set value in the cell is cleared"""
        cell = self._editable_cell(row, col, value)
        if cell is not None:
            cell.toggle_note(value)
        return self.snapshot()

    def clear_cell(self, row: int, col: int) -> SudokuSnapshot:
        """Clear both value and notes"""
        cell = self._editable_cell(row, col)
        if cell is not None:
            cell.clear()
        return self.snapshot()

    def select_cell(self, row: int, col: int) -> SudokuSnapshot:
        """Select a cell for number input; fixed cells and finished games ignore selection"""
        self._require_started()
        cell = self.board.cell(row, col)
        if not (cell.is_fixed or self.is_over):
            self.selected = (row, col)
        return self.snapshot()

    def toggle_note_mode(self) -> SudokuSnapshot:
        self._require_started()
        self.note_mode = not self.note_mode
        return self.snapshot()

    def enter(self, value: int) -> SudokuSnapshot:
        """Route a digit to the selected cell as a note or a value, depending on note mode"""
        self._require_started()
        if self.selected is None:
            return self.snapshot()
        row, col = self.selected
        if self.note_mode:
            return self.toggle_note(row, col, value)
        return self.set_value(row, col, value)

    def clear_selected(self) -> SudokuSnapshot:
        self._require_started()
        if self.selected is None:
            return self.snapshot()
        return self.clear_cell(*self.selected)

    def highlighted_positions(self, row: int, col: int) -> FrozenSet[Tuple[int, int]]:
        """Union of the row, column and box containing (row, col)"""
        self._require_started()
        highlighted = set(self.board.row_positions(row))
        highlighted.update(self.board.column_positions(col))
        highlighted.update(self.board.box_positions(row, col, config.BOX_SIZE))
        return frozenset(highlighted)

    def _check_completion(self) -> bool:
        """
        Complete when every cell holds a value and none conflicts

        The cached is_invalid flags only describe each cell at its last
        write, so they are recomputed here before deciding.
        """
        cells = list(self.board.cells())
        if any(cell.value is None for cell in cells):
            return False

        for cell in cells:
            if not cell.is_fixed:
                cell.is_invalid = not self.is_valid_placement(cell.row, cell.col, cell.value)
        if any(cell.is_invalid for cell in cells):
            return False

        self.game_state = GameState.COMPLETE
        self.selected = None
        self.timer.stop()
        logger.info("Sudoku (%s) completed in %d seconds with %d mistakes",
                    self.difficulty, self.timer.elapsed, self.mistakes)
        return True

    def snapshot(self, celebrate: bool = False) -> SudokuSnapshot:
        """Immutable view of the current session"""
        cells = ()
        highlighted = frozenset()
        if self.board is not None:
            cells = tuple(
                tuple(cell.view() for cell in self.board.row_cells(row))
                for row in range(self.board.rows)
            )
            if self.selected is not None:
                highlighted = self.highlighted_positions(*self.selected)
        return SudokuSnapshot(
            difficulty=self.difficulty,
            state=self.game_state,
            outcome=self.outcome,
            cells=cells,
            mistakes=self.mistakes,
            elapsed=self.timer.elapsed,
            timer_active=self.timer.active,
            selected=self.selected,
            highlighted=highlighted,
            note_mode=self.note_mode,
            celebrate=celebrate,
        )
