"""
Grid Games - Console Front-End
Renders engine snapshots as text and turns typed commands into actions
"""

import argparse
import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

from . import config
from .api import Action, GameAPI
from .catalog import available_games, create_game
from .errors import ConfigurationError, GridGameError
from .minesweeper import MinesweeperGame
from .session import Outcome
from .snapshots import MinesweeperSnapshot, SudokuSnapshot, TicTacToeSnapshot
from .sudoku import SudokuGame
from .tictactoe import TicTacToeGame
from .timer import WallClockTicker, format_time


# verb -> (action, number of integer arguments)
COMMANDS: Dict[str, Tuple[Action, int]] = {
    'r': (Action.REVEAL, 2),
    'f': (Action.FLAG, 2),
    's': (Action.SET_VALUE, 3),
    'n': (Action.TOGGLE_NOTE, 3),
    'c': (Action.CLEAR, 2),
    'sel': (Action.SELECT, 2),
    'p': (Action.PLACE, 2),
}

HELP = {
    'minesweeper': "r ROW COL = reveal, f ROW COL = flag/unflag",
    'sudoku': ("s ROW COL DIGIT = set, n ROW COL DIGIT = note, c ROW COL = clear, "
               "sel ROW COL = select, e DIGIT = enter into selection, x = clear selection, "
               "m = toggle note mode"),
    'tictactoe': "p ROW COL = place mark, size N = change board size before the first move",
}


def render_minesweeper(snapshot: MinesweeperSnapshot) -> str:
    lines = [f"💣 {snapshot.remaining_mines:3d}   ⏱ {format_time(snapshot.elapsed)}   "
             f"[{snapshot.state.value}]"]
    lines.append("    " + " ".join(f"{col:2d}" for col in range(snapshot.size)))
    for row, cells in enumerate(snapshot.cells):
        symbols = []
        for cell in cells:
            if cell.revealed:
                symbol = '*' if cell.has_mine else (str(cell.adjacent_mines) if cell.adjacent_mines else '.')
            elif cell.flagged:
                symbol = 'F'
            else:
                symbol = '#'
            symbols.append(f"{symbol:>2}")
        lines.append(f"{row:2d}  " + " ".join(symbols))
    return "\n".join(lines)


def render_sudoku(snapshot: SudokuSnapshot) -> str:
    mode = "notes" if snapshot.note_mode else "values"
    lines = [f"🧩 {snapshot.difficulty}   ⏱ {format_time(snapshot.elapsed)}   "
             f"{snapshot.mistakes} mistakes   mode: {mode}   [{snapshot.state.value}]"]
    for row, cells in enumerate(snapshot.cells):
        if row and row % config.BOX_SIZE == 0:
            lines.append("------+-------+------")
        parts = []
        for col, cell in enumerate(cells):
            if col and col % config.BOX_SIZE == 0:
                parts.append("|")
            if cell.value is None:
                parts.append('.')
            elif cell.is_invalid:
                parts.append('!')
            else:
                parts.append(str(cell.value))
        lines.append(" ".join(parts))
    if snapshot.selected is not None:
        row, col = snapshot.selected
        notes = sorted(snapshot.cell(row, col).notes)
        lines.append(f"selected ({row}, {col}) notes: {notes}")
    if snapshot.celebrate:
        lines.append("🎉 Puzzle complete! 🎉")
    return "\n".join(lines)


def render_tictactoe(snapshot: TicTacToeSnapshot) -> str:
    scores = snapshot.scores
    lines = [f"X: {scores.x}  O: {scores.o}  draws: {scores.draws}   "
             f"⏱ {format_time(snapshot.elapsed)}"]
    for row in snapshot.board:
        lines.append(" ".join(mark or '.' for mark in row))
    if snapshot.winner:
        lines.append(f"{snapshot.winner} wins!")
    elif snapshot.outcome == Outcome.DRAW:
        lines.append("It's a draw!")
    else:
        lines.append(f"{snapshot.current_player} to move")
    return "\n".join(lines)


def render(snapshot) -> str:
    if isinstance(snapshot, MinesweeperSnapshot):
        return render_minesweeper(snapshot)
    if isinstance(snapshot, SudokuSnapshot):
        return render_sudoku(snapshot)
    return render_tictactoe(snapshot)


def parse_command(line: str) -> Tuple[str, List[int]]:
    """
    Split a command line into a verb and integer arguments

    Raises:
        ValueError: if an argument is not an integer
    """
    parts = line.split()
    if not parts:
        return '', []
    verb, raw_args = parts[0].lower(), parts[1:]
    try:
        args = [int(arg) for arg in raw_args]
    except ValueError:
        raise ValueError(f"Arguments must be integers: {' '.join(raw_args)}")
    return verb, args


class ConsoleSession:
    """Text front-end for one game; only reads snapshots and dispatches actions"""

    def __init__(self, api: GameAPI, params: Dict,
                 read_line: Callable[[str], str] = input,
                 write: Callable[[str], None] = print,
                 ticker: Optional[WallClockTicker] = None):
        self.api = api
        self.params = params
        self.read_line = read_line
        self.write = write
        self.ticker = ticker or WallClockTicker(api)

    @property
    def engine(self):
        return self.api.engine

    def start(self):
        self.api.new_game(**self.params)
        self.ticker.restart()
        self.write(render(self.engine.snapshot()))

    def run(self):
        """Read commands until 'q' or end of input"""
        self.start()
        while True:
            try:
                line = self.read_line("> ")
            except EOFError:
                break
            self.ticker.pump()
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """
        Execute one command line

        Returns:
            False when the player asked to quit
        """
        try:
            verb, args = parse_command(line)
        except ValueError as e:
            self.write(f"❌ {e}")
            return True

        if verb in ('q', 'quit', 'exit'):
            return False
        if verb == '':
            self.write(render(self.engine.snapshot()))
        elif verb in ('h', 'help'):
            self.write(HELP[self.engine.game_id] + ", new = new game, q = quit")
        elif verb == 'new':
            self.start()
        elif verb in COMMANDS:
            self._dispatch(verb, args)
        else:
            self._engine_command(verb, args)
        return True

    def _dispatch(self, verb: str, args: List[int]):
        action, arg_count = COMMANDS[verb]
        if len(args) != arg_count:
            self.write(f"❌ '{verb}' takes {arg_count} numbers")
            return
        result = self.api.take_action(action, *args)
        if not result['success']:
            self.write(f"❌ {result['error']}")
            return
        self.write(render(self.api.last_snapshot))

    def _engine_command(self, verb: str, args: List[int]):
        """Commands that map to engine calls outside the cell action set"""
        engine = self.engine
        try:
            if verb == 'size' and isinstance(engine, TicTacToeGame) and len(args) == 1:
                snapshot = engine.resize(args[0])
                self.params['size'] = args[0]
            elif verb == 'm' and isinstance(engine, SudokuGame):
                snapshot = engine.toggle_note_mode()
            elif verb == 'e' and isinstance(engine, SudokuGame) and len(args) == 1:
                snapshot = engine.enter(args[0])
            elif verb == 'x' and isinstance(engine, SudokuGame):
                snapshot = engine.clear_selected()
            else:
                self.write(f"❌ Unknown command: {verb}. Type 'help' for commands.")
                return
        except GridGameError as e:
            self.write(f"❌ {e}")
            return
        self.write(render(snapshot))


def game_params(args: argparse.Namespace) -> Dict:
    """new_game() keyword arguments for the selected game"""
    if args.game == 'minesweeper':
        return {'size': config.DEFAULT_SIZE if args.size is None else args.size,
                'mine_count': config.DEFAULT_MINE_COUNT if args.mines is None else args.mines}
    if args.game == 'sudoku':
        return {'difficulty': args.difficulty}
    return {'size': config.DEFAULT_BOARD_SIZE if args.size is None else args.size}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid Games - Minesweeper, Sudoku and Tic-Tac-Toe in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --game minesweeper --size 12 --mines 20
  python main.py --game sudoku --difficulty hard
  python main.py --game tictactoe --size 4
        """
    )

    parser.add_argument('--game',
                        choices=[info.game_id for info in available_games()],
                        default='minesweeper',
                        help='Game to play (default: minesweeper)')

    parser.add_argument('--size',
                        type=int,
                        help=f'Board size: {config.MIN_SIZE}-{config.MAX_SIZE} for minesweeper '
                             f'(default: {config.DEFAULT_SIZE}), {config.MIN_BOARD_SIZE}-'
                             f'{config.MAX_BOARD_SIZE} for tic-tac-toe (default: {config.DEFAULT_BOARD_SIZE})')

    parser.add_argument('--mines',
                        type=int,
                        help=f'Minesweeper mine count (default: {config.DEFAULT_MINE_COUNT})')

    parser.add_argument('--difficulty',
                        choices=list(config.DIFFICULTIES),
                        default=config.DEFAULT_DIFFICULTY,
                        help=f'Sudoku difficulty (default: {config.DEFAULT_DIFFICULTY})')

    parser.add_argument('--seed',
                        type=int,
                        help='Random seed for a reproducible minesweeper layout')

    parser.add_argument('--verbose',
                        action='store_true',
                        help='Log engine transitions')
    return parser


def main(argv: Optional[List[str]] = None,
         read_line: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    engine = create_game(args.game)
    if isinstance(engine, MinesweeperGame) and args.seed is not None:
        engine.rng = random.Random(args.seed)

    session = ConsoleSession(GameAPI(engine), game_params(args), read_line, write)
    try:
        session.run()
    except ConfigurationError as e:
        write(f"❌ {e}")
        return 2
    except KeyboardInterrupt:
        write("\nGame interrupted by user")
    return 0
