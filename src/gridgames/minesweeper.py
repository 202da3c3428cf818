"""
Minesweeper - Core Game Logic
Mine placement, adjacency counts, flood-fill reveal, flag bookkeeping and win/loss detection
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Set, Tuple

from . import config
from .grid import Grid
from .session import GameSession, Outcome
from .snapshots import MineCellView, MinesweeperSnapshot


logger = logging.getLogger(__name__)


class GameState(Enum):
    """Enumeration for different game states"""
    UNINITIALIZED = "uninitialized"
    READY = "ready"  # awaiting first reveal
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class CellState(Enum):
    """Enumeration for cell states"""
    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"


class Cell:
    """Represents a single cell on the minesweeper board"""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.has_mine = False
        self.state = CellState.HIDDEN
        self.adjacent_mines = 0

    def place_mine(self):
        """Place a mine in this cell"""
        self.has_mine = True

    def reveal(self) -> bool:
        """Reveal this cell"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.REVEALED
            return True
        return False

    def toggle_flag(self):
        """Toggle flag state on this cell"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN

    def is_revealed(self) -> bool:
        """Check if cell is revealed"""
        return self.state == CellState.REVEALED

    def is_flagged(self) -> bool:
        """Check if cell is flagged"""
        return self.state == CellState.FLAGGED

    def view(self) -> MineCellView:
        return MineCellView(
            revealed=self.is_revealed(),
            has_mine=self.has_mine,
            flagged=self.is_flagged(),
            adjacent_mines=self.adjacent_mines,
        )


class MinesweeperGame(GameSession):
    """Manages the minesweeper board and game logic for one session at a time"""

    game_id = 'minesweeper'

    def __init__(self, rng: Optional[random.Random] = None, timer=None):
        super().__init__(timer)
        self.rng = rng or random.Random()
        self.size = 0
        self.mine_count = 0
        self.board: Optional[Grid[Cell]] = None
        self.game_state = GameState.UNINITIALIZED
        self.mines_placed = False
        self.flags_used = 0
        self.cells_revealed = 0
        self.clicked_mine_pos: Optional[Tuple[int, int]] = None

    @property
    def started(self) -> bool:
        return self.game_state != GameState.UNINITIALIZED

    @property
    def outcome(self) -> Outcome:
        if self.game_state == GameState.WON:
            return Outcome.WIN
        if self.game_state == GameState.LOST:
            return Outcome.LOSS
        return Outcome.NONE

    def new_game(self, size: int = config.DEFAULT_SIZE,
                 mine_count: int = config.DEFAULT_MINE_COUNT) -> MinesweeperSnapshot:
        """
        Start a fresh session with an all-hidden, mine-free board

        Args:
            size: Board edge length
            mine_count: Number of mines to place on the first reveal

        Raises:
            ConfigurationError: if size or mine_count is out of range; the
                current session is left untouched
        """
        config.validate_minesweeper(size, mine_count)

        self.size = size
        self.mine_count = mine_count
        self.board = Grid(size, size, Cell)
        self.game_state = GameState.READY
        self.mines_placed = False
        self.flags_used = 0
        self.cells_revealed = 0
        self.clicked_mine_pos = None
        self.timer.reset()

        logger.info("New minesweeper game: %dx%d with %d mines", size, size, mine_count)
        return self.snapshot()

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at specified position"""
        self._require_started()
        return self.board.cell(row, col)

    def _place_mines(self, first_click_row: int, first_click_col: int):
        """Place mines by rejection sampling, keeping the first click and its neighbours clear"""
        safe_positions = {(first_click_row, first_click_col)}
        safe_positions.update(self.board.neighbors(first_click_row, first_click_col))

        mines_placed = 0
        while mines_placed < self.mine_count:
            row = self.rng.randrange(self.size)
            col = self.rng.randrange(self.size)
            cell = self.board.cell(row, col)
            if cell.has_mine or (row, col) in safe_positions:
                continue
            cell.place_mine()
            mines_placed += 1

        self._calculate_adjacent_mines()
        self.mines_placed = True
        logger.debug("Placed %d mines around safe opening at (%d, %d)",
                     mines_placed, first_click_row, first_click_col)

    def _calculate_adjacent_mines(self):
        """Calculate the number of adjacent mines for each cell"""
        for row, col in self.board.positions():
            cell = self.board.cell(row, col)
            if not cell.has_mine:
                cell.adjacent_mines = sum(
                    1 for nr, nc in self.board.neighbors(row, col)
                    if self.board.cell(nr, nc).has_mine
                )

    def reveal(self, row: int, col: int) -> MinesweeperSnapshot:
        """
        Reveal a cell and handle game logic

        No-op when the game is over or the cell is already revealed or flagged.
        """
        self._require_started()
        cell = self.board.cell(row, col)

        if self.is_over or cell.state != CellState.HIDDEN:
            return self.snapshot()

        # Place mines on first click
        if not self.mines_placed:
            self._place_mines(row, col)
            self.game_state = GameState.PLAYING
            self.timer.start()

        if cell.has_mine:
            cell.reveal()
            self.cells_revealed += 1
            self.clicked_mine_pos = (row, col)
            self._reveal_all_mines()
            self._finish(GameState.LOST)
            return self.snapshot()

        revealed = self._flood_reveal(row, col)
        logger.debug("Reveal at (%d, %d) opened %d cells", row, col, len(revealed))

        if self._check_win_condition():
            self._flag_all_mines()
            self._finish(GameState.WON)

        return self.snapshot()

    def _flood_reveal(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Reveal a safe cell and cascade through zero-count neighbours

        Uses an explicit stack so large open regions never hit the recursion
        limit. Flagged cells are never auto-revealed.
        """
        revealed = []
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            cell = self.board.cell(r, c)
            if not cell.reveal():
                continue
            self.cells_revealed += 1
            revealed.append((r, c))

            if cell.adjacent_mines == 0:
                for nr, nc in self.board.neighbors(r, c):
                    if self.board.cell(nr, nc).state == CellState.HIDDEN:
                        stack.append((nr, nc))
        return revealed

    def toggle_flag(self, row: int, col: int) -> MinesweeperSnapshot:
        """
        Toggle flag on a cell

        Flags are capped at the mine count; placing one beyond the cap is ignored.
        """
        self._require_started()
        cell = self.board.cell(row, col)

        if self.is_over or cell.is_revealed():
            return self.snapshot()

        if cell.is_flagged():
            cell.toggle_flag()
            self.flags_used -= 1
        elif self.flags_used < self.mine_count:
            cell.toggle_flag()
            self.flags_used += 1

        return self.snapshot()

    def _reveal_all_mines(self):
        """Reveal all mines when game is lost"""
        for cell in self.board.cells():
            if cell.has_mine and not cell.is_revealed():
                if cell.is_flagged():
                    self.flags_used -= 1
                cell.state = CellState.REVEALED

    def _flag_all_mines(self):
        """Flag all mines when game is won"""
        for cell in self.board.cells():
            if cell.has_mine:
                cell.state = CellState.FLAGGED
        self.flags_used = self.mine_count

    def _check_win_condition(self) -> bool:
        """Won once no cell is left that is neither revealed nor mined"""
        return self.cells_revealed == self.size * self.size - self.mine_count

    def _finish(self, state: GameState):
        self.game_state = state
        self.timer.stop()
        logger.info("Minesweeper game %s after %d seconds", state.value, self.timer.elapsed)

    def get_remaining_mines(self) -> int:
        """Get the number of remaining mines (total mines - flags used)"""
        return max(0, self.mine_count - self.flags_used)

    def mine_positions(self) -> Set[Tuple[int, int]]:
        self._require_started()
        return {(cell.row, cell.col) for cell in self.board.cells() if cell.has_mine}

    def snapshot(self) -> MinesweeperSnapshot:
        """Immutable view of the current session"""
        cells = ()
        if self.board is not None:
            cells = tuple(
                tuple(cell.view() for cell in self.board.row_cells(row))
                for row in range(self.size)
            )
        return MinesweeperSnapshot(
            size=self.size,
            mine_count=self.mine_count,
            state=self.game_state,
            outcome=self.outcome,
            flags_used=self.flags_used,
            cells=cells,
            elapsed=self.timer.elapsed,
            timer_active=self.timer.active,
            clicked_mine=self.clicked_mine_pos,
        )
