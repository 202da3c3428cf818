"""
Shared fixtures for the grid games test suite
"""

import random

import pytest

from gridgames.minesweeper import GameState, MinesweeperGame


def rig_minesweeper(size, mines):
    """Build a game in PLAYING state with mines at known positions"""
    game = MinesweeperGame(rng=random.Random(0))
    game.new_game(size, len(mines))
    for row, col in mines:
        game.board.cell(row, col).place_mine()
    game._calculate_adjacent_mines()
    game.mines_placed = True
    game.game_state = GameState.PLAYING
    game.timer.start()
    return game


@pytest.fixture
def rigged_minesweeper():
    """Factory fixture: rigged_minesweeper(size, [(row, col), ...])"""
    return rig_minesweeper


def count_mines(game):
    return sum(1 for cell in game.board.cells() if cell.has_mine)
