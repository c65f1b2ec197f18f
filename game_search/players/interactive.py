"""
Human player reading moves from an input function.

Accepted formats: "13", "1 3" or "1,3" (row then column, 1-based).
Malformed, out-of-range or occupied cells are reported and re-prompted,
so bad input never reaches the game state.
"""

import logging
import re
from typing import Callable, Optional

from game_search.game.tictactoe import Position, TicTacToeState
from game_search.players.base import Player

logger = logging.getLogger(__name__)

MOVE_PATTERN = re.compile(r"^\s*(\d)\s*[, ]?\s*(\d)\s*$")


def parse_move(text: str) -> Optional[Position]:
    """
    Parse a row/column pair.

    Returns:
        Position, or None if the text is not two digits
    """
    match = MOVE_PATTERN.match(text)
    if match is None:
        return None
    return Position(int(match.group(1)), int(match.group(2)))


class InteractivePlayer(Player):
    """
    Player reading moves from stdin (or any input function).

    Attributes:
        input_fn: Called with a prompt, returns one line of input
        output_fn: Called with feedback messages
    """

    name = "human"

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn

    def next_move(self, state: TicTacToeState) -> Position:
        while True:
            text = self.input_fn("Your move (row col): ")
            position = parse_move(text)

            if position is None:
                self.output_fn(f"Could not read a move from {text.strip()!r}, expected e.g. '1 3'")
            elif not position.is_valid():
                self.output_fn(f"Position {position} is out of range, rows and columns are 1-3")
            elif not state.is_free(position):
                self.output_fn(f"Cell {position} is already occupied")
            else:
                return position

            logger.debug(f"Rejected move input: {text!r}")
