"""
Game Module

This module defines the Node abstraction consumed by the search engine
and the tic-tac-toe adapter that implements it.

Key Components:
    - Node (ABC): Capability contract every searchable game state satisfies
    - InvariantViolation: Fatal errors raised when the contract is broken
    - TicTacToeState / TicTacToeNode: 3x3 tic-tac-toe rules

Data Flow:
    TicTacToeState → TicTacToeNode → engine.evaluate() → int score
                                      Positive = X advantage
                                      Negative = O advantage
"""

from game_search.game.base import (
    IllegalMoveError,
    InvariantViolation,
    MalformedNodeError,
    Node,
)
from game_search.game.tictactoe import (
    MAX_SCORE,
    O,
    X,
    Position,
    TicTacToeNode,
    TicTacToeState,
)

__all__ = [
    'Node',
    'InvariantViolation',
    'MalformedNodeError',
    'IllegalMoveError',
    'Position',
    'TicTacToeState',
    'TicTacToeNode',
    'MAX_SCORE',
    'X',
    'O',
]
