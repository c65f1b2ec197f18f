"""
Engine-backed player.

Wraps a SearchEngine: the current state becomes a root node, every child is
scored with the full window and the first best child's move is played.
"""

import logging
from typing import Optional

from game_search.game.tictactoe import Position, TicTacToeNode, TicTacToeState
from game_search.players.base import Player
from game_search.search.alphabeta import SearchEngine

logger = logging.getLogger(__name__)


class AutoPlayer(Player):
    """
    Player that searches the full game tree.

    The engine (and its transposition table) is kept between moves, so
    positions searched on earlier turns are answered from the cache.
    """

    name = "auto"

    def __init__(self, engine: Optional[SearchEngine] = None):
        self.engine = engine if engine is not None else SearchEngine()

    def next_move(self, state: TicTacToeState) -> Position:
        nodes_before = self.engine.stats.nodes

        best = self.engine.best_child(TicTacToeNode(state))
        move = best.last_move

        logger.info(
            f"Engine plays {move} "
            f"(nodes={self.engine.stats.nodes - nodes_before}, tt={self.engine.transposition_table!r})"
        )
        return move

    def __repr__(self) -> str:
        return f"AutoPlayer({self.engine!r})"
