"""
Transposition Table

This module implements a transposition table (TT) - a hash table that caches
subtree values so a position reached through different move orders is only
searched once.

Window soundness:
    A value computed under an (alpha, beta) window is only the true value
    when it lies strictly inside that window. A search that stopped on a
    cutoff returns a bound, not a value. Every entry therefore carries a
    NodeType flag, and a cached value is reused only where that flag
    proves it valid for the current window:

        EXACT        → reuse as is
        LOWER_BOUND  → true value >= cached value, raise alpha
        UPPER_BOUND  → true value <= cached value, lower beta

    With exact_only=True bounds are never stored at all.

Keys:
    The engine keys entries by node.search_key(), the structural position
    together with its ply depth. Stored values include the depth adjustment
    of their terminal leaves, so the same position searched at another ply
    has a different value. Python dicts resolve hash collisions through
    equality, so two distinct keys never share an entry.

References:
    - Transposition Table: https://www.chessprogramming.org/Transposition_Table
    - Node Types: https://www.chessprogramming.org/Node_Types
"""

import logging
from enum import Enum
from typing import Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)


class NodeType(Enum):
    """
    How a cached value relates to the true value of its position.

        - EXACT: All children searched, value inside the window
        - LOWER_BOUND: Beta cutoff (true value is at least this)
        - UPPER_BOUND: Fail low (true value is at most this)
    """
    EXACT = 0
    LOWER_BOUND = 1
    UPPER_BOUND = 2


def classify(value: int, alpha: float, beta: float) -> NodeType:
    """
    Classify a fail-soft search result against the window it was searched with.

    Args:
        value: Value returned by the search
        alpha: Lower edge of the window the search ran with
        beta: Upper edge of the window the search ran with

    Returns:
        NodeType describing what the value proves
    """
    if value <= alpha:
        return NodeType.UPPER_BOUND
    if value >= beta:
        return NodeType.LOWER_BOUND
    return NodeType.EXACT


class TTEntry:
    """
    Entry in the transposition table.

    Attributes:
        value: Search result for the position
        node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
        depth: Ply depth of the position (informational)
    """

    __slots__ = ("value", "node_type", "depth")

    def __init__(self, value: int, node_type: NodeType, depth: int = 0):
        self.value = value
        self.node_type = node_type
        self.depth = depth

    def __repr__(self) -> str:
        return f"TTEntry(value={self.value}, type={self.node_type.name}, depth={self.depth})"


class TranspositionTable:
    """
    Transposition table for caching subtree values.

    Owned by exactly one SearchEngine; never shared between searches.

    Attributes:
        max_size: Maximum number of entries (oldest evicted first)
        exact_only: Store EXACT values only, drop bounds
        table: Dictionary mapping search key → TTEntry
    """

    def __init__(self, max_size: int = 1_000_000, exact_only: bool = False):
        self.max_size = max_size
        self.exact_only = exact_only
        self.table: Dict[Hashable, TTEntry] = {}
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def store(
        self,
        key: Hashable,
        value: int,
        node_type: NodeType,
        depth: int = 0,
    ):
        """
        Store a search result.

        Args:
            key: Search key of the position
            value: Search result
            node_type: What the value proves (see classify)
            depth: Ply depth of the position
        """
        if self.exact_only and node_type is not NodeType.EXACT:
            return

        existing = self.table.get(key)
        # An exact value is never downgraded to a bound
        if existing is not None and existing.node_type is NodeType.EXACT:
            return

        self.table[key] = TTEntry(value, node_type, depth)

        if len(self.table) > self.max_size:
            oldest_key = next(iter(self.table))
            del self.table[oldest_key]
            self.evictions += 1

    def lookup(self, key: Hashable) -> Optional[TTEntry]:
        """
        Look up a position.

        Returns:
            TTEntry if present, None otherwise. The caller must check
            node_type before trusting the value.
        """
        entry = self.table.get(key)
        if entry is None:
            self.misses += 1
        else:
            self.hits += 1
        return entry

    def narrow_window(self, key: Hashable, alpha: float, beta: float) -> Tuple[Optional[int], float, float]:
        """
        Use a cached entry against the current window.

        Args:
            key: Search key of the position
            alpha: Current alpha
            beta: Current beta

        Returns:
            (value, alpha, beta): value is not None when the entry settles
            the position for this window; otherwise the window narrowed by
            whatever bound the entry proves.
        """
        entry = self.lookup(key)
        if entry is None:
            return None, alpha, beta

        if entry.node_type is NodeType.EXACT:
            return entry.value, alpha, beta
        if entry.node_type is NodeType.LOWER_BOUND:
            alpha = max(alpha, entry.value)
        else:
            beta = min(beta, entry.value)

        if alpha >= beta:
            return entry.value, alpha, beta
        return None, alpha, beta

    def get_or_compute(
        self,
        key: Hashable,
        alpha: float,
        beta: float,
        compute: Callable[[float, float], int],
        depth: int = 0,
    ) -> int:
        """
        Return the cached value of a position or compute and cache it.

        Args:
            key: Search key of the position
            alpha: Current alpha
            beta: Current beta
            compute: Function searching the position under a window
            depth: Ply depth of the position

        Returns:
            int: Value valid for the (alpha, beta) window

        A new bound equal to the opposite bound already cached proves the
        value exact, and is stored as such.
        """
        value, alpha, beta = self.narrow_window(key, alpha, beta)
        if value is not None:
            return value

        known = self.table.get(key)
        value = compute(alpha, beta)
        node_type = classify(value, alpha, beta)

        bounds = {known.node_type, node_type} if known is not None else set()
        if bounds == {NodeType.LOWER_BOUND, NodeType.UPPER_BOUND} and known.value == value:
            node_type = NodeType.EXACT

        self.store(key, value, node_type, depth)
        return value

    def clear(self):
        """Clear all entries from the transposition table."""
        logger.debug(f"Clearing transposition table ({len(self.table)} entries)")

        self.table.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get_stats(self) -> Dict[str, int | float]:
        """Get statistics about transposition table usage."""

        total_lookups = self.hits + self.misses
        hit_rate = (self.hits / total_lookups * 100) if total_lookups > 0 else 0

        return {
            'entries': len(self.table),
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
            'hit_rate': hit_rate,
        }

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: Hashable) -> bool:
        return key in self.table

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"TranspositionTable(entries={stats['entries']}, "
            f"hit_rate={stats['hit_rate']:.1f}%)"
        )
