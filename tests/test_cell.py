"""
Unit tests for the Minesweeper Cell class
Tests individual cell behavior and state management
"""

import pytest
from gridgames.minesweeper import Cell, CellState


class TestCell:
    """Test cases for the Cell class"""

    def test_cell_initialization(self):
        """Test that cell initializes with correct default values"""
        cell = Cell(3, 5)

        assert cell.row == 3
        assert cell.col == 5
        assert cell.has_mine is False
        assert cell.state == CellState.HIDDEN
        assert cell.adjacent_mines == 0

    def test_place_mine(self):
        cell = Cell(0, 0)
        cell.place_mine()
        assert cell.has_mine is True

    def test_reveal_hidden_cell(self):
        """Test revealing a hidden cell returns True"""
        cell = Cell(0, 0)

        assert cell.reveal() is True
        assert cell.state == CellState.REVEALED

    def test_reveal_already_revealed_cell(self):
        cell = Cell(0, 0)
        cell.reveal()

        assert cell.reveal() is False
        assert cell.state == CellState.REVEALED

    def test_reveal_flagged_cell(self):
        """Test revealing a flagged cell returns False"""
        cell = Cell(0, 0)
        cell.toggle_flag()

        assert cell.reveal() is False
        assert cell.state == CellState.FLAGGED

    def test_toggle_flag_round_trip(self):
        cell = Cell(0, 0)
        cell.toggle_flag()
        assert cell.is_flagged() is True

        cell.toggle_flag()
        assert cell.is_flagged() is False
        assert cell.state == CellState.HIDDEN

    def test_toggle_flag_on_revealed_cell(self):
        """Test that revealed cells cannot be flagged"""
        cell = Cell(0, 0)
        cell.reveal()

        cell.toggle_flag()
        assert cell.state == CellState.REVEALED

    @pytest.mark.parametrize("flag,reveal", [(True, False), (False, True), (True, True)])
    def test_never_revealed_and_flagged(self, flag, reveal):
        """A single state field makes revealed+flagged unrepresentable"""
        cell = Cell(1, 1)
        if flag:
            cell.toggle_flag()
        if reveal:
            cell.reveal()

        view = cell.view()
        assert not (view.revealed and view.flagged)
