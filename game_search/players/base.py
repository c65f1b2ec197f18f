"""
Abstract Player Interface

A player picks the next move for the side to move. The game runner only
knows this interface, so human and engine players are interchangeable.
"""

from abc import ABC, abstractmethod

from game_search.game.tictactoe import Position, TicTacToeState


class Player(ABC):
    """Base class for tic-tac-toe players."""

    name = "player"

    @abstractmethod
    def next_move(self, state: TicTacToeState) -> Position:
        """
        Choose a move.

        Args:
            state: Current position, not terminal

        Returns:
            Position of a free cell
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
