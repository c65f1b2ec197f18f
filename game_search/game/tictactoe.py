"""
Tic-Tac-Toe Game Adapter

This module implements 3x3 tic-tac-toe on top of the abstract Node
interface so the generic search engine can play it.

Board Representation:
    3x3 numpy int8 array, read-only once built
     1: X (maximising side, moves first)
    -1: O (minimising side)
     0: empty cell

Coordinates:
    Positions are 1-based: Position(1, 1) is the top-left cell,
    Position(3, 3) the bottom-right cell.

Scores:
    +10 if X has completed a line, -10 if O has, 0 otherwise.
    The search engine adjusts terminal scores by depth to prefer
    quicker wins, so the raw score here is never depth-aware.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from game_search.game.base import IllegalMoveError, Node

BOARD_SIZE = 3
MAX_SCORE = 10

X = 1
O = -1
EMPTY = 0

CELL_SYMBOLS = {X: "x", O: "o", EMPTY: "."}
SYMBOL_TO_CELL = {"x": X, "o": O, ".": EMPTY}


@dataclass(frozen=True)
class Position:
    """A board cell, 1-based row and column."""

    row: int
    col: int

    def is_valid(self) -> bool:
        return 1 <= self.row <= BOARD_SIZE and 1 <= self.col <= BOARD_SIZE

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


# ============================================================================
# Zobrist Hashing
# ============================================================================
# One random 64-bit number per (player, cell) plus one for the side to move.
# Hash = XOR of the numbers of all occupied cells, XOR side key if O to move.
# Move history never enters the hash, so transpositions collide on purpose.
# ============================================================================

_zobrist_rng = random.Random(42)

# ZOBRIST_CELLS[0] for X, ZOBRIST_CELLS[1] for O, indexed by row * 3 + col
ZOBRIST_CELLS = [
    [_zobrist_rng.getrandbits(64) for _ in range(BOARD_SIZE * BOARD_SIZE)]
    for _ in range(2)
]
ZOBRIST_SIDE_TO_MOVE = _zobrist_rng.getrandbits(64)


def zobrist_hash(board: np.ndarray, to_play: int) -> int:
    """
    Compute the Zobrist hash of a tic-tac-toe position.

    Args:
        board: 3x3 array of cell values
        to_play: X or O

    Returns:
        64-bit integer hash
    """
    hash_value = 0
    for index, cell in enumerate(board.flat):
        if cell == X:
            hash_value ^= ZOBRIST_CELLS[0][index]
        elif cell == O:
            hash_value ^= ZOBRIST_CELLS[1][index]

    if to_play == O:
        hash_value ^= ZOBRIST_SIDE_TO_MOVE

    return hash_value


def find_winner(board: np.ndarray) -> Optional[int]:
    """
    Side that completed a line.

    Args:
        board: 3x3 array of cell values

    Returns:
        X or O if a row, column or diagonal is complete, None otherwise
    """
    line_sums = np.concatenate([
        board.sum(axis=1),
        board.sum(axis=0),
        [np.trace(board), np.trace(np.fliplr(board))],
    ])
    if (line_sums == BOARD_SIZE * X).any():
        return X
    if (line_sums == BOARD_SIZE * O).any():
        return O
    return None


class TicTacToeState:
    """
    Immutable tic-tac-toe position.

    Attributes:
        board: Read-only 3x3 int8 array
        to_play: X or O, the side to move
    """

    def __init__(self, board: Optional[np.ndarray] = None, to_play: int = X):
        if board is None:
            board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

        board = np.array(board, dtype=np.int8)
        if board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {board.shape}")
        if to_play not in (X, O):
            raise ValueError(f"to_play must be X (1) or O (-1), got {to_play}")

        board.setflags(write=False)
        self.board = board
        self.to_play = to_play
        self._hash = zobrist_hash(board, to_play)
        self._winner = find_winner(board)

    @classmethod
    def new(cls) -> "TicTacToeState":
        """Empty board, X to move."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "TicTacToeState":
        """
        Parse a position from its grid rendering.

        Rows are separated by newlines or '/', cells are 'x', 'o' or '.'.
        The side to move is derived from the piece counts (X moves first).

        Example:
            >>> TicTacToeState.from_string("xx./oo./...")
        """
        rows = [row.strip() for row in text.replace("/", "\n").strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells, got {text!r}")

        try:
            board = np.array(
                [[SYMBOL_TO_CELL[symbol] for symbol in row.lower()] for row in rows],
                dtype=np.int8,
            )
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r} in {text!r}") from None

        x_count = int(np.count_nonzero(board == X))
        o_count = int(np.count_nonzero(board == O))
        if x_count - o_count not in (0, 1):
            raise ValueError(f"Unreachable position: {x_count} x and {o_count} o")

        return cls(board, X if x_count == o_count else O)

    def next_state(self, position: Position) -> "TicTacToeState":
        """
        Apply a move for the side to move.

        Args:
            position: Cell to occupy

        Returns:
            New state; this state is left untouched

        Raises:
            IllegalMoveError: Cell out of range, already occupied,
                or the game is already over
        """
        if not position.is_valid():
            raise IllegalMoveError(
                f"Position {position} is out of range 1..{BOARD_SIZE}"
            )
        if self.board[position.row - 1, position.col - 1] != EMPTY:
            raise IllegalMoveError(f"Cell {position} is already occupied")
        if self.is_terminal():
            raise IllegalMoveError(f"Cannot play {position}: the game is over")

        board = self.board.copy()
        board[position.row - 1, position.col - 1] = self.to_play
        return TicTacToeState(board, -self.to_play)

    def is_free(self, position: Position) -> bool:
        return position.is_valid() and bool(self.board[position.row - 1, position.col - 1] == EMPTY)

    def free_positions(self) -> List[Position]:
        """Empty cells in row-major order."""
        return [
            Position(int(row) + 1, int(col) + 1)
            for row, col in np.argwhere(self.board == EMPTY)
        ]

    def winner(self) -> Optional[int]:
        """X or O if a line is complete, None otherwise."""
        return self._winner

    def score(self) -> int:
        winner = self.winner()
        return 0 if winner is None else winner * MAX_SCORE

    def is_terminal(self) -> bool:
        return self.winner() is not None or not (self.board == EMPTY).any()

    def depth(self) -> int:
        return int(np.count_nonzero(self.board))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeState):
            return NotImplemented
        return self.to_play == other.to_play and np.array_equal(self.board, other.board)

    def __str__(self) -> str:
        return "\n".join(
            "".join(CELL_SYMBOLS[int(cell)] for cell in row) for row in self.board
        )

    def __repr__(self) -> str:
        grid = "/".join(str(self).splitlines())
        return f"TicTacToeState({grid!r}, to_play={CELL_SYMBOLS[self.to_play]})"


class TicTacToeNode(Node):
    """
    Search node wrapping a tic-tac-toe state and the moves that led to it.

    Two nodes are equal when their states are equal, whatever their
    move histories.
    """

    def __init__(self, state: Optional[TicTacToeState] = None, moves: Tuple[Position, ...] = ()):
        self.state = state if state is not None else TicTacToeState.new()
        self.moves = tuple(moves)

    def play(self, position: Position) -> "TicTacToeNode":
        return TicTacToeNode(self.state.next_state(position), self.moves + (position,))

    def children(self) -> List["TicTacToeNode"]:
        if self.state.is_terminal():
            return []
        return [self.play(position) for position in self.state.free_positions()]

    def is_terminal(self) -> bool:
        return self.state.is_terminal()

    def score(self) -> int:
        return self.state.score()

    def is_maximising(self) -> bool:
        return self.state.to_play == X

    def depth(self) -> int:
        return self.state.depth()

    def position(self) -> TicTacToeState:
        return self.state

    @property
    def last_move(self) -> Optional[Position]:
        return self.moves[-1] if self.moves else None
