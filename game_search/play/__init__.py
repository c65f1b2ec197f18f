"""
Play Interface

This module runs complete games from the command line: it alternates turns
between two players, prints the board after every ply and announces the
result.

Game Flow:
    runner → player x → next_move(state) → state.next_state(move) → print
    runner → player o → next_move(state) → state.next_state(move) → print
    ... until the position is terminal → "x wins" / "o wins" / "Draw"
"""

from game_search.play.interface import GameRunner, main, setup_logger

__all__ = ['GameRunner', 'main', 'setup_logger']
