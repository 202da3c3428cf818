"""
Tests for the immutable snapshots handed to the presentation layer
"""

import dataclasses
import json

import numpy as np
import pytest

from gridgames.minesweeper import MinesweeperGame
from gridgames.snapshots import MineCellView
from gridgames.sudoku import SudokuGame
from gridgames.tictactoe import TicTacToeGame


class TestMinesweeperSnapshot:

    def test_snapshot_is_frozen(self, rigged_minesweeper):
        snapshot = rigged_minesweeper(5, [(0, 0)]).snapshot()

        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.flags_used = 3
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.cell(0, 0).revealed = True

    def test_snapshot_unaffected_by_later_actions(self, rigged_minesweeper):
        game = rigged_minesweeper(5, [(0, 0)])
        before = game.snapshot()

        game.toggle_flag(0, 0)

        assert before.cell(0, 0).flagged is False
        assert before.flags_used == 0

    @pytest.mark.parametrize("view,code", [
        (MineCellView(False, False, False, 0), -3),
        (MineCellView(False, True, True, 0), -2),
        (MineCellView(True, True, False, 0), -1),
        (MineCellView(True, False, False, 4), 4),
    ])
    def test_visible_code(self, view, code):
        assert view.visible_code() == code

    def test_board_array(self, rigged_minesweeper):
        game = rigged_minesweeper(5, [(row, 2) for row in range(5)])
        game.toggle_flag(4, 4)
        game.reveal(0, 0)

        board = game.snapshot().board_array()

        assert board.shape == (5, 5)
        assert board.dtype == np.int8
        assert board[0, 0] == 0
        assert board[0, 1] == 2
        assert board[0, 2] == -3
        assert board[4, 4] == -2
        with pytest.raises(ValueError):
            board[0, 0] = 5

    def test_board_array_before_new_game(self):
        assert MinesweeperGame().snapshot().board_array().size == 0

    def test_to_dict_is_json_ready(self, rigged_minesweeper):
        game = rigged_minesweeper(5, [(0, 0)])
        game.reveal(0, 0)

        state = json.loads(json.dumps(game.snapshot().to_dict()))

        assert state['game_state'] == 'lost'
        assert state['outcome'] == 'loss'
        assert state['is_game_over'] is True
        assert state['clicked_mine'] == [0, 0]
        assert state['visible_board'][0][0] == -1


class TestSudokuSnapshot:

    def test_board_array(self):
        game = SudokuGame()
        game.new_game('easy')
        game.set_value(0, 2, 4)

        values = game.snapshot().board_array()

        assert values[0].tolist() == [5, 3, 4, 0, 7, 0, 0, 0, 0]
        assert values.flags.writeable is False

    def test_to_dict(self):
        game = SudokuGame()
        game.new_game('easy')
        game.set_value(0, 2, 7)
        game.select_cell(0, 3)

        state = game.snapshot().to_dict()

        assert state['invalid'][0][2] is True
        assert state['fixed'][0][0] is True
        assert state['mistakes'] == 1
        assert state['selected'] == (0, 3)
        assert (0, 0) in state['highlighted']
        assert state['is_game_over'] is False
        json.dumps(state)

    def test_is_complete(self):
        game = SudokuGame()
        assert game.snapshot().is_complete is False


class TestTicTacToeSnapshot:

    def test_board_array_encoding(self):
        game = TicTacToeGame()
        game.place(0, 0)
        game.place(2, 2)

        board = game.snapshot().board_array()

        assert board.tolist() == [[1, 0, 0], [0, 0, 0], [0, 0, -1]]
        assert board.flags.writeable is False

    def test_to_dict(self):
        game = TicTacToeGame()
        for move in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            game.place(*move)

        state = json.loads(json.dumps(game.snapshot().to_dict()))

        assert state['board'][0] == ['X', 'X', 'X']
        assert state['board'][2] == [None, None, None]
        assert state['winner'] == 'X'
        assert state['scores'] == {'X': 1, 'O': 0, 'draws': 0}
        assert state['outcome'] == 'win'

    def test_snapshot_board_is_immutable(self):
        snapshot = TicTacToeGame().snapshot()

        with pytest.raises(TypeError):
            snapshot.board[0][0] = 'X'
