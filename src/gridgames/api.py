"""
Grid Games - Action API
Provides a single dispatch interface for a presentation layer to drive any engine
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import GridGameError, InvalidActionError
from .minesweeper import CellState, MinesweeperGame
from .session import GameSession
from .sudoku import SudokuGame
from .tictactoe import TicTacToeGame


logger = logging.getLogger(__name__)


class Action(Enum):
    """Player actions accepted by the engines"""
    REVEAL = "reveal"
    FLAG = "flag"
    SET_VALUE = "set_value"
    TOGGLE_NOTE = "toggle_note"
    CLEAR = "clear"
    SELECT = "select"
    PLACE = "place"


# Action -> engine method name, per engine type
ACTION_METHODS = {
    MinesweeperGame: {
        Action.REVEAL: 'reveal',
        Action.FLAG: 'toggle_flag',
    },
    SudokuGame: {
        Action.SET_VALUE: 'set_value',
        Action.TOGGLE_NOTE: 'toggle_note',
        Action.CLEAR: 'clear_cell',
        Action.SELECT: 'select_cell',
    },
    TicTacToeGame: {
        Action.PLACE: 'place',
    },
}

VALUE_ACTIONS = (Action.SET_VALUE, Action.TOGGLE_NOTE)


class GameAPI:
    """
    Action-dispatch capability handed to a presentation layer

    Wraps one engine, records every action taken and converts contract
    violations into unsuccessful results instead of exceptions.
    """

    def __init__(self, engine: GameSession):
        """
        Initialize the game API

        Args:
            engine: The session to drive (Minesweeper, Sudoku or Tic-Tac-Toe)
        """
        if type(engine) not in ACTION_METHODS:
            raise TypeError(f"Unsupported engine: {type(engine).__name__}")
        self.engine = engine
        self.action_history: List[Dict[str, Any]] = []
        self.last_snapshot = engine.snapshot()

    @property
    def supported_actions(self) -> List[Action]:
        return list(ACTION_METHODS[type(self.engine)])

    def new_game(self, **params) -> Dict[str, Any]:
        """
        Start a new game on the wrapped engine

        Returns:
            Initial game state
        """
        snapshot = self.engine.new_game(**params)
        self.action_history.clear()
        self.last_snapshot = snapshot
        return snapshot.to_dict()

    def take_action(self, action: Action, row: int, col: int,
                    value: Optional[int] = None) -> Dict[str, Any]:
        """
        Take an action at the specified coordinates

        Args:
            action: Action to take
            row: Row coordinate (0-indexed)
            col: Column coordinate (0-indexed)
            value: Digit for SET_VALUE and TOGGLE_NOTE

        Returns:
            Updated game state with action result
        """
        action_record = {
            'row': row,
            'col': col,
            'action': action.value,
            'value': value,
            'outcome_before': self.engine.outcome.value,
        }

        success = False
        error = None
        state = None

        try:
            method = self._resolve(action)
            if action in VALUE_ACTIONS:
                if value is None:
                    raise InvalidActionError(f"Action {action.value} requires a value")
                snapshot = method(row, col, value)
            else:
                snapshot = method(row, col)
            self.last_snapshot = snapshot
            state = snapshot.to_dict()
            success = True
        except GridGameError as e:
            error = str(e)
            logger.debug("Rejected %s at (%s, %s): %s", action.value, row, col, error)

        action_record.update({
            'success': success,
            'error': error,
            'outcome_after': self.engine.outcome.value,
        })
        self.action_history.append(action_record)

        result = {
            'success': success,
            'action': action.value,
            'coordinates': (row, col),
            'state': state if state is not None else self.get_game_state(),
        }
        if error:
            result['error'] = error
        return result

    def tick(self) -> bool:
        """Forward one timer tick to the engine"""
        return self.engine.tick()

    def get_game_state(self) -> Dict[str, Any]:
        """
        Get the current complete game state

        Returns:
            JSON-ready dictionary built from an immutable snapshot
        """
        return self.engine.snapshot().to_dict()

    def get_valid_actions(self) -> List[Tuple[int, int, Action]]:
        """
        Get all actions that would change the board in the current state

        Returns:
            List of (row, col, action) tuples
        """
        engine = self.engine
        if not engine.started or engine.is_over:
            return []

        valid_actions = []
        if isinstance(engine, MinesweeperGame):
            for cell in engine.board.cells():
                if cell.state == CellState.HIDDEN:
                    valid_actions.append((cell.row, cell.col, Action.REVEAL))
                    if engine.flags_used < engine.mine_count:
                        valid_actions.append((cell.row, cell.col, Action.FLAG))
                elif cell.state == CellState.FLAGGED:
                    valid_actions.append((cell.row, cell.col, Action.FLAG))
        elif isinstance(engine, SudokuGame):
            for cell in engine.board.cells():
                if not cell.is_fixed:
                    valid_actions.append((cell.row, cell.col, Action.SET_VALUE))
        elif isinstance(engine, TicTacToeGame):
            for row, col in engine.board.positions():
                if engine.is_cell_empty(row, col):
                    valid_actions.append((row, col, Action.PLACE))
        return valid_actions

    def export_game_state(self) -> str:
        """
        Export current game state as JSON string

        Returns:
            JSON string of game state
        """
        return json.dumps(self.get_game_state(), indent=2)

    def get_action_history(self) -> List[Dict[str, Any]]:
        """
        Get the history of all actions taken

        Returns:
            List of action records
        """
        return self.action_history.copy()

    def _resolve(self, action: Action):
        methods = ACTION_METHODS[type(self.engine)]
        if action not in methods:
            raise InvalidActionError(
                f"Action {action.value} is not supported by {self.engine.game_id}")
        return getattr(self.engine, methods[action])
