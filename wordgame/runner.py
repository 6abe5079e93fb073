# wordgame/runner.py

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Optional, Tuple

from dotenv import load_dotenv
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import GameConfig
from .constants import BOARD_SIZE
from .dictionary import load_word_list
from .errors import WordGameError
from .geometry import bonus_at
from .session import ActionResult, GameSession
from .types import BonusKind, Phase

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  ready            draw tiles and start your turn
  select R C       select a square (again to flip across/down)
  place I          put rack tile I on the selected square
  type L           put a tile with letter L (or a blank) on the selected square
  blank L          choose the letter for a blank tile
  cancel           cancel choosing a blank letter
  back             take back the tile under the cursor
  exchange         enter or leave exchange mode
  mark I           mark rack tile I for exchange
  submit           submit the play or the exchange
  preview          show the provisional score
  quit             leave the game"""

# name -> argument types
COMMANDS = {
    'ready': (),
    'select': (int, int),
    'place': (int,),
    'type': (str,),
    'blank': (str,),
    'cancel': (),
    'back': (),
    'exchange': (),
    'mark': (int,),
    'submit': (),
    'preview': (),
    'help': (),
    'quit': (),
}

BONUS_STYLES = {
    BonusKind.TRIPLE_WORD: 'on red',
    BonusKind.DOUBLE_WORD: 'on magenta',
    BonusKind.TRIPLE_LETTER: 'on blue',
    BonusKind.DOUBLE_LETTER: 'on cyan',
    BonusKind.CENTER: 'on magenta',
}


@dataclass
class RunnerConfig:
    """Configuration for the console runner"""
    players: List[str]
    dictionary_path: Path
    seed: Optional[int] = None
    script: Optional[Path] = None
    reset_direction_on_select: bool = False


def parse_command(line: str) -> Tuple[str, tuple]:
    """Turn a typed line into (command, args). Raises ValueError on bad input."""
    parts = line.strip().split()
    if not parts:
        raise ValueError("Empty command")
    name, raw_args = parts[0].lower(), parts[1:]
    if name not in COMMANDS:
        raise ValueError(f"Unknown command '{name}'. Type 'help' for the list")

    types = COMMANDS[name]
    if len(raw_args) != len(types):
        raise ValueError(f"'{name}' takes {len(types)} argument(s), got {len(raw_args)}")
    try:
        args = tuple(t(a) for t, a in zip(types, raw_args))
    except ValueError:
        raise ValueError(f"Bad arguments for '{name}': {' '.join(raw_args)}") from None
    return name, args


def apply_command(session: GameSession, name: str, args: tuple) -> ActionResult:
    """Dispatch a parsed game command to the session"""
    if name == 'ready':
        return session.ready()
    if name == 'select':
        return session.select_cell(*args)
    if name == 'place':
        return session.place_tile(*args)
    if name == 'type':
        return session.type_letter(*args)
    if name == 'blank':
        return session.designate_blank(*args)
    if name == 'cancel':
        return session.cancel_blank_designation()
    if name == 'back':
        return session.retract_last()
    if name == 'exchange':
        return session.toggle_exchange_mode()
    if name == 'mark':
        return session.toggle_exchange_selection(*args)
    if name == 'submit':
        return session.submit()
    raise ValueError(f"'{name}' is not a game action")


def board_to_string(session: GameSession) -> str:
    """Plain-text board, pending tiles in lower case"""
    pending = {p.position: p.tile.letter for p in session.pending}
    result = ["   " + " ".join(str(col % 10) for col in range(BOARD_SIZE))]
    result.append("   " + "-" * (BOARD_SIZE * 2 - 1))
    for row in range(BOARD_SIZE):
        row_str = f"{row:2d}|"
        for col in range(BOARD_SIZE):
            tile = session.board[row, col]
            if tile is not None:
                row_str += f"{tile.letter} "
            elif (row, col) in pending:
                row_str += f"{pending[(row, col)].lower()} "
            else:
                row_str += ". "
        result.append(row_str.rstrip())
    return "\n".join(result)


def render_board(session: GameSession) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 0))
    table.add_column("", justify="right")
    for col in range(BOARD_SIZE):
        table.add_column(str(col), justify="center", width=3)

    pending = {p.position: p.tile for p in session.pending}
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            tile = session.board[row, col]
            bonus = bonus_at(row, col)
            if tile is not None:
                cells.append(f"[bold]{tile.letter}[/]")
            elif (row, col) in pending:
                cells.append(f"[bold yellow]{pending[(row, col)].letter}[/]")
            elif session.selected == (row, col):
                cells.append("[reverse]_[/]")
            elif bonus != BonusKind.NONE:
                cells.append(f"[{BONUS_STYLES[bonus]}]{bonus.label}[/]")
            else:
                cells.append("·")
        table.add_row(str(row), *cells)
    return table


def render_status(session: GameSession) -> Table:
    table = Table(box=box.ROUNDED, style="cyan")
    table.add_column("Player")
    table.add_column("Score", justify="right")
    for index, player in enumerate(session.players):
        marker = "▶ " if index == session.active_index and not session.is_over else ""
        table.add_row(f"{marker}{escape(player.name)}", str(player.score))
    return table


def render_rack(session: GameSession) -> str:
    if session.phase != Phase.PLACING:
        return f"{session.active_player.name}, ready?"
    tiles = []
    for index, tile in enumerate(session.active_player.rack):
        label = '?' if tile.is_blank else tile.letter
        marked = '*' if index in session.exchange_selection else ''
        tiles.append(f"{index}:{label}{tile.points}{marked}")
    mode = "EXCHANGE" if session.exchange_mode else session.direction.name
    return f"Rack [{' '.join(tiles)}]  {mode}  bag: {len(session.bag)}"


class ConsoleGame:
    """Drives a GameSession from typed commands"""

    def __init__(self, session: GameSession, console: Optional[Console] = None):
        self.session = session
        self.console = console or Console()

    def show(self) -> None:
        self.console.print(render_board(self.session))
        self.console.print(render_status(self.session))
        self.console.print(render_rack(self.session), markup=False)
        if self.session.blank_request is not None:
            self.console.print("[yellow]Choose a letter for the blank: blank L[/]")

    def handle(self, line: str) -> bool:
        """Process one command line. Returns False when the player quits."""
        try:
            name, args = parse_command(line)
        except ValueError as e:
            self.console.print(f"[red]{escape(str(e))}[/]")
            return True

        if name == 'quit':
            return False
        if name == 'help':
            self.console.print(HELP_TEXT)
            return True
        if name == 'preview':
            preview = self.session.preview_score()
            if preview.valid:
                self.console.print(f"[green]Valid play worth {preview.score} points[/]")
            else:
                self.console.print(f"[red]{escape(preview.reason)}[/]")
            return True

        result = apply_command(self.session, name, args)
        self.session = result.session
        if not result.valid:
            self.console.print(Panel(escape(result.message), style="red bold"))
        elif result.message:
            self.console.print(f"[green]{escape(result.message)}[/]")
        return True

    def run(self, stream: IO[str]) -> GameSession:
        self.console.print(Panel("Word game. Type 'help' for commands", style="bold blue"))
        self.show()
        for line in stream:
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            if not self.handle(line):
                break
            self.show()
            if self.session.is_over:
                self.show_final()
                break
        return self.session

    def show_final(self) -> None:
        table = Table(title="Final Scores", box=box.HEAVY_EDGE)
        table.add_column("Player")
        table.add_column("Score", justify="right")
        for player in self.session.standings():
            table.add_row(escape(player.name), str(player.score))
        self.console.print(table)


def parse_args(argv: Optional[List[str]] = None) -> RunnerConfig:
    """Parse command line arguments"""
    env = GameConfig.from_env()
    parser = argparse.ArgumentParser(description='Play the word game in the terminal')
    parser.add_argument(
        '--players',
        type=str,
        required=True,
        help='Comma-separated list of 2-4 player names'
    )
    parser.add_argument(
        '--dictionary',
        type=Path,
        default=env.dictionary_path,
        help='WORD,INTEGER word list (default: $WORDGAME_DICTIONARY)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=env.seed,
        help='Seed for tile shuffling'
    )
    parser.add_argument(
        '--script',
        type=Path,
        default=None,
        help='Read commands from a file instead of stdin'
    )
    parser.add_argument(
        '--reset-direction',
        action='store_true',
        default=env.reset_direction_on_select,
        help='Reset to across whenever a new square is selected'
    )

    args = parser.parse_args(argv)
    if args.dictionary is None:
        parser.error("--dictionary is required (or set WORDGAME_DICTIONARY)")
    return RunnerConfig(
        players=[p.strip() for p in args.players.split(',') if p.strip()],
        dictionary_path=args.dictionary,
        seed=args.seed,
        script=args.script,
        reset_direction_on_select=args.reset_direction,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    config = parse_args(argv)
    try:
        dictionary = load_word_list(config.dictionary_path)
        session = GameSession.new(
            config.players,
            dictionary,
            config=GameConfig(seed=config.seed, reset_direction_on_select=config.reset_direction_on_select,
                              dictionary_path=config.dictionary_path),
        )
    except (OSError, ValueError, WordGameError) as e:
        logger.error(f"Could not start game: {e}")
        return 1

    game = ConsoleGame(session)
    if config.script:
        with open(config.script, encoding='utf-8') as f:
            game.run(f)
    else:
        game.run(sys.stdin)
    return 0


if __name__ == '__main__':
    sys.exit(main())
