"""
Tests for the console front-end
"""

import random
from unittest.mock import Mock

import pytest

from gridgames.api import GameAPI
from gridgames.cli import (ConsoleSession, build_parser, game_params, main,
                           parse_command, render)
from gridgames.minesweeper import MinesweeperGame
from gridgames.sudoku import SudokuGame
from gridgames.tictactoe import TicTacToeGame
from test_sudoku import EASY_SOLUTION


def scripted(lines):
    """read_line replacement that feeds lines and then signals end of input"""
    pending = list(lines)

    def read_line(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)
    return read_line


def make_session(engine, params, lines=()):
    output = []
    session = ConsoleSession(GameAPI(engine), params, read_line=scripted(lines),
                             write=output.append, ticker=Mock())
    return session, output


class TestParseCommand:

    @pytest.mark.parametrize("line,expected", [
        ("r 3 4", ('r', [3, 4])),
        ("  S 0 2 4 ", ('s', [0, 2, 4])),
        ("", ('', [])),
        ("help", ('help', [])),
    ])
    def test_parse(self, line, expected):
        assert parse_command(line) == expected

    def test_non_integer_argument(self):
        with pytest.raises(ValueError):
            parse_command("r a 1")


class TestRender:

    def test_render_minesweeper(self, rigged_minesweeper):
        game = rigged_minesweeper(5, [(row, 2) for row in range(5)])
        game.toggle_flag(0, 4)
        game.reveal(0, 0)

        text = render(game.snapshot())

        assert "00:00" in text
        assert "[playing]" in text
        assert text.splitlines()[2].split() == ['0', '.', '2', '#', '#', 'F']

    def test_render_sudoku(self):
        game = SudokuGame()
        game.new_game('easy')
        game.set_value(0, 2, 7)

        lines = render(game.snapshot()).splitlines()

        assert lines[1] == "5 3 ! | . 7 . | . . ."
        assert "------+-------+------" in lines

    def test_render_tictactoe(self):
        game = TicTacToeGame()
        game.place(1, 1)

        lines = render(game.snapshot()).splitlines()

        assert lines[2] == ". X ."
        assert lines[-1] == "O to move"


class TestConsoleSession:

    def test_run_plays_until_end_of_input(self):
        session, output = make_session(TicTacToeGame(), {'size': 3},
                                       ["p 0 0", "p 1 0", "p 0 1", "p 1 1", "p 0 2"])

        session.run()

        assert output[-1].splitlines()[-1] == "X wins!"
        assert session.ticker.pump.call_count == 5
        session.ticker.restart.assert_called_once()

    def test_quit_stops_reading(self):
        session, output = make_session(TicTacToeGame(), {'size': 3}, ["q", "p 0 0"])

        session.run()

        assert session.engine.move_count == 0

    def test_rejected_action_prints_error(self):
        session, output = make_session(TicTacToeGame(), {'size': 3})
        session.start()

        session.handle("p 5 5")

        assert output[-1].startswith("❌ Invalid coordinates")

    def test_wrong_argument_count(self):
        session, output = make_session(TicTacToeGame(), {'size': 3})
        session.start()

        session.handle("p 1")

        assert "takes 2 numbers" in output[-1]

    def test_unknown_command(self):
        session, output = make_session(SudokuGame(), {'difficulty': 'easy'})
        session.start()

        session.handle("dance")

        assert "Unknown command" in output[-1]

    def test_sudoku_selection_commands(self):
        session, output = make_session(SudokuGame(), {'difficulty': 'easy'})
        session.start()

        for line in ["sel 0 2", "m", "e 4", "m", "e 4"]:
            session.handle(line)

        assert session.engine.get_cell(0, 2).value == 4
        session.handle("x")
        assert session.engine.get_cell(0, 2).value is None

    def test_celebration_rendered_on_completion(self):
        engine = SudokuGame()
        session, output = make_session(engine, {'difficulty': 'easy'})
        session.start()
        # Leave one square open and finish the puzzle through the console
        for row in range(9):
            for col in range(9):
                if (row, col) != (0, 2) and not engine.get_cell(row, col).is_fixed:
                    engine.set_value(row, col, EASY_SOLUTION[row][col])

        session.handle("s 0 2 4")

        assert "Puzzle complete" in output[-1]

    def test_tictactoe_resize(self):
        session, output = make_session(TicTacToeGame(), {'size': 3})
        session.start()

        session.handle("size 4")
        assert session.engine.board_size == 4
        assert session.params['size'] == 4

        session.handle("p 0 0")
        session.handle("size 5")
        assert "locked" in output[-1]

        session.handle("new")
        assert session.engine.board_size == 4

    def test_help(self):
        session, output = make_session(MinesweeperGame(), {'size': 5, 'mine_count': 3})
        session.start()

        session.handle("help")

        assert output[-1].startswith("r ROW COL")


class TestMain:

    def test_game_params(self):
        parser = build_parser()

        assert game_params(parser.parse_args([])) == {'size': 10, 'mine_count': 15}
        assert game_params(parser.parse_args(['--game', 'sudoku', '--difficulty', 'hard'])) == \
            {'difficulty': 'hard'}
        assert game_params(parser.parse_args(['--game', 'tictactoe'])) == {'size': 3}

    def test_main_plays_scripted_game(self):
        output = []

        code = main(['--game', 'tictactoe', '--size', '4'], read_line=scripted(["p 0 0"]),
                    write=output.append)

        assert code == 0
        assert output[-1].splitlines()[1] == "X . . ."

    def test_main_seeded_minesweeper_is_reproducible(self):
        boards = []
        for _ in range(2):
            output = []
            main(['--seed', '9', '--size', '6', '--mines', '5'],
                 read_line=scripted(["r 0 0"]), write=output.append)
            boards.append(output[-1])

        assert boards[0] == boards[1]

    def test_main_rejects_bad_configuration(self):
        output = []

        code = main(['--game', 'minesweeper', '--size', '5', '--mines', '20'],
                    read_line=scripted([]), write=output.append)

        assert code == 2
        assert output[-1].startswith("❌")

    @pytest.mark.parametrize("argv", [
        ['--game', 'tictactoe', '--size', '0'],
        ['--game', 'minesweeper', '--size', '0'],
        ['--game', 'minesweeper', '--mines', '0'],
    ])
    def test_zero_arguments_are_not_replaced_by_defaults(self, argv):
        output = []

        assert main(argv, read_line=scripted([]), write=output.append) == 2
        assert output[-1].startswith("❌ Invalid")

    def test_main_handles_interrupt(self):
        output = []

        def interrupt(prompt):
            raise KeyboardInterrupt

        assert main(['--game', 'sudoku'], read_line=interrupt, write=output.append) == 0
        assert "interrupted" in output[-1]

    def test_seed_applies_only_to_minesweeper(self, monkeypatch):
        seeded = Mock(wraps=random.Random)
        monkeypatch.setattr('gridgames.cli.random.Random', seeded)

        main(['--game', 'sudoku', '--seed', '3'], read_line=scripted([]), write=lambda text: None)

        seeded.assert_not_called()
