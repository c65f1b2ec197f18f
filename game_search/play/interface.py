"""
Tic-Tac-Toe Game Runner

This module alternates turns between two players until the game is over,
printing the board after every ply.

Player Types:
    - human: Reads "row col" from stdin
    - auto: Alpha-beta search through its own SearchEngine

Error Handling:
    - Bad human input is re-prompted by the player, never applied
    - An InvariantViolation (broken Node contract, illegal move applied)
      is a programming error: it is logged with its traceback and the
      run terminates with exit status 1

Usage:
    python -m game_search.play --x human --o auto
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from game_search.game.base import InvariantViolation
from game_search.game.tictactoe import CELL_SYMBOLS, O, X, TicTacToeState
from game_search.players.auto import AutoPlayer
from game_search.players.base import Player
from game_search.players.interactive import InteractivePlayer
from game_search.search.alphabeta import SearchEngine
from game_search.search.config import CACHE_POLICIES, SearchConfig

DEFAULT_LOG_FILE = Path.home() / ".game_search" / "game.log"


def setup_logger(debug: bool = False, log_file: Optional[Path] = None):
    """
    Setup file-based logger for game debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Destination file (default: ~/.game_search/game.log)

    Returns:
        Configured logger instance
    """
    log_file = Path(log_file) if log_file else DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("game_search")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class GameRunner:
    """
    Turn loop for a single game.

    Attributes:
        players: Player for X and player for O
        state: Current position
        history: Every position of the game, starting position first
        output_fn: Where boards and results are printed
    """

    def __init__(
        self,
        player_x: Player,
        player_o: Player,
        state: Optional[TicTacToeState] = None,
        output_fn: Callable[[str], None] = print,
    ):
        self.players: Dict[int, Player] = {X: player_x, O: player_o}
        self.state = state if state is not None else TicTacToeState.new()
        self.history: List[TicTacToeState] = [self.state]
        self.output_fn = output_fn
        self.logger = logging.getLogger(__name__)

    def play_turn(self) -> TicTacToeState:
        """Ask the side to move for a move and apply it."""
        side = CELL_SYMBOLS[self.state.to_play]
        player = self.players[self.state.to_play]

        move = player.next_move(self.state)
        self.state = self.state.next_state(move)
        self.history.append(self.state)

        self.logger.info(f"{side} ({player.name}) plays {move}")
        self.logger.debug(f"Board:\n{self.state}")

        self.output_fn(str(self.state))
        self.output_fn("")
        return self.state

    def run(self) -> TicTacToeState:
        """
        Play until the game is over.

        Returns:
            The terminal position
        """
        self.logger.info(
            f"=== New game: x={self.players[X].name}, o={self.players[O].name} ==="
        )

        while not self.state.is_terminal():
            self.play_turn()

        self.output_fn(self.result())
        self.logger.info(f"=== Game over: {self.result()} ===")
        return self.state

    def result(self) -> str:
        winner = self.state.winner()
        if winner is None:
            return "Draw" if self.state.is_terminal() else "In progress"
        return f"{CELL_SYMBOLS[winner]} wins"


def make_player(kind: str, config: SearchConfig) -> Player:
    """Build a player from its command-line selector."""
    if kind == "human":
        return InteractivePlayer()
    if kind == "auto":
        return AutoPlayer(SearchEngine(config))
    raise ValueError(f"Unknown player type: {kind}")


def search_config_from_args(args: argparse.Namespace) -> SearchConfig:
    if args.cache_policy == "none":
        return SearchConfig(use_cache=False)
    return SearchConfig(cache_policy=args.cache_policy)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against the alpha-beta engine"
    )
    parser.add_argument(
        "--x",
        choices=["human", "auto"],
        default="human",
        help="Player for x, who moves first (default: human)"
    )
    parser.add_argument(
        "--o",
        choices=["human", "auto"],
        default="auto",
        help="Player for o (default: auto)"
    )
    parser.add_argument(
        "--cache-policy",
        choices=[*CACHE_POLICIES, "none"],
        default="bounded",
        help="Transposition table policy for engine players (default: bounded)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Log file (default: {DEFAULT_LOG_FILE})"
    )
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    logger = setup_logger(debug=args.debug, log_file=args.log_file)
    config = search_config_from_args(args)
    logger.info(f"Configuration: {config!r}")

    runner = GameRunner(make_player(args.x, config), make_player(args.o, config))

    try:
        runner.run()
    except InvariantViolation as e:
        logger.critical(f"Invariant violated: {e}", exc_info=True)
        print(f"Fatal: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        logger.warning("Game interrupted by user")
        print("\n\nGame interrupted by user")
        sys.exit(1)
