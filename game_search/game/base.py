"""
Abstract Game Node Interface

This module defines the abstract base class every searchable game state
must implement. The search engine is written once against this interface
and never references a concrete game.

Key Principles:
    1. Nodes are immutable: applying a move returns a new node
    2. children() is empty exactly when is_terminal() is True
    3. score() is ground truth only at terminal nodes
    4. Node identity is the game position, never the move history

Convention:
    - Positive scores favour the maximising side, negative the minimising side
    - Return 0 for draws and neutral positions
    - depth() counts plies already played, used to prefer quicker wins
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, List, Tuple


class InvariantViolation(Exception):
    """
    A caller or game adapter broke the Node contract.

    These are programming errors. They are raised and never caught
    inside the search core.
    """


class MalformedNodeError(InvariantViolation):
    """A non-terminal node produced no children."""


class IllegalMoveError(InvariantViolation):
    """A move was applied to an occupied or out-of-range position."""


class Node(ABC):
    """
    Abstract base class for game tree nodes.

    Attributes:
        moves: Tuple of moves applied since the start of the game.
            Tuples are immutable, so no two nodes share a history buffer.

    Methods:
        children(): All positions reachable with one legal move
        is_terminal(): True when no legal move exists
        score(): Outcome (terminal) or placeholder (internal) score
        is_maximising(): True when the side to move maximises
        depth(): Plies already played
        position(): Hashable structural key of the game position
        search_key(): Cache key, position plus depth
    """

    moves: Tuple[Any, ...] = ()

    @abstractmethod
    def children(self) -> List["Node"]:
        """
        Generate all direct successor nodes.

        Returns:
            List of nodes in the game's own enumeration order.
            Empty if and only if the node is terminal.
        """
        pass

    @abstractmethod
    def is_terminal(self) -> bool:
        pass

    @abstractmethod
    def score(self) -> int:
        """
        Evaluate the node from the maximising side's perspective.

        Returns:
            int: Game outcome at terminal nodes (win > 0, loss < 0, draw 0).
            Any value at internal nodes; the search never trusts it.
        """
        pass

    @abstractmethod
    def is_maximising(self) -> bool:
        pass

    @abstractmethod
    def depth(self) -> int:
        """Number of plies played to reach this position."""
        pass

    @abstractmethod
    def position(self) -> Hashable:
        """
        Structural identity of the game position.

        Must not include the move history, so that transpositions
        (the same position reached through different move orders)
        compare equal. The children of a node must depend on its
        position alone.
        """
        pass

    def search_key(self) -> Hashable:
        """
        Key under which search results for this node are cached.

        Terminal values are adjusted by the ply depth of the terminal
        node, so a subtree's value depends on the depth it is searched
        at as well as on the position. Transpositions reached at the
        same depth share a key; the same position at another depth
        does not.
        """
        return (self.position(), self.depth())

    def __hash__(self) -> int:
        return hash(self.position())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.position() == other.position()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(depth={self.depth()}, moves={list(self.moves)})"
