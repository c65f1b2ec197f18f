"""
Minimax Search with Alpha-Beta Pruning

This module implements the core search algorithm. Minimax explores the game
tree assuming optimal play by both sides, and alpha-beta pruning skips the
subtrees that cannot change the result. The engine only talks to the
abstract Node interface, so any finite two-player zero-sum game with
perfect information can be searched.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Fail-soft: Returned values may fall outside the (alpha, beta) window,
      in which case they are bounds rather than exact values
    - Principal Variation (PV): Best line of play found

Move Ordering:
    Children are searched in the node's own enumeration order. No ordering
    heuristic is applied, so pruning effectiveness depends on the game.

Depth Preference:
    Terminal scores are shrunk towards zero by the ply depth of the terminal
    node. Every value compared in the tree is derived from these leaves, so
    among equally winning lines the shortest is preferred, and among equally
    losing lines the longest.

Recursion:
    The search is recursive; its depth equals the game's maximum ply count.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
    - Fail-Soft: https://www.chessprogramming.org/Fail-Soft
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from game_search.game.base import MalformedNodeError, Node
from game_search.search.config import SearchConfig
from game_search.search.transposition import TranspositionTable

logger = logging.getLogger(__name__)

INFINITY = float("inf")


def terminal_value(node: Node, prefer_short_wins: bool = True) -> int:
    """
    Convert a terminal node's outcome into a comparable search value.

    A winning score is decreased by the node depth and a losing score
    increased by it, never crossing zero, so quicker wins and slower
    losses score higher.

    Args:
        node: Terminal node
        prefer_short_wins: Apply the depth adjustment

    Returns:
        int: Depth-adjusted score
    """
    score = node.score()
    if not prefer_short_wins or score == 0:
        return score

    depth = node.depth()
    if score > 0:
        return max(score - depth, 1)
    return min(score + depth, -1)


@dataclass
class SearchStats:
    """Counters accumulated by a SearchEngine across calls."""

    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0

    def reset(self):
        self.nodes = 0
        self.leaves = 0
        self.cutoffs = 0


class SearchEngine:
    """
    Alpha-beta minimax engine over the Node interface.

    Each engine owns its transposition table, so independent engines
    never interfere with each other.

    Attributes:
        config: SearchConfig (score window, cache policy, depth preference)
        transposition_table: Position cache, None when caching is disabled
        stats: SearchStats counters

    Methods:
        evaluate: Score a node
        best_variation: Score a node and return its principal variation
        best_child: Pick the best successor of a node
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.stats = SearchStats()

        if self.config.use_cache:
            self.transposition_table: Optional[TranspositionTable] = TranspositionTable(
                max_size=self.config.cache_max_size,
                exact_only=self.config.cache_policy == "exact_only",
            )
        else:
            self.transposition_table = None

    def evaluate(
        self,
        node: Node,
        alpha: Optional[float] = None,
        beta: Optional[float] = None,
    ) -> int:
        """
        Minimax value of a node with alpha-beta pruning.

        Args:
            node: Root of the subtree to evaluate
            alpha: Best score guaranteed to the maximiser (default: config.min_score)
            beta: Best score guaranteed to the minimiser (default: config.max_score)

        Returns:
            int: Exact value when it lies strictly inside (alpha, beta),
            otherwise a bound on it (fail-soft)

        Raises:
            MalformedNodeError: A non-terminal node in the tree has no children

        Algorithm:
            1. Terminal node → depth-adjusted score
            2. Cached (position, depth) → reuse the entry if valid for the window
            3. For each child in enumeration order:
                a. Recursively evaluate with the current window
                b. Keep the first child reaching the best value
                c. Cut off when the window closes
            4. Return best value found
        """
        alpha = self.config.min_score if alpha is None else alpha
        beta = self.config.max_score if beta is None else beta

        nodes_before = self.stats.nodes
        value = self._alphabeta(node, alpha, beta)

        logger.debug(
            f"Evaluated {node!r} in window [{alpha}, {beta}]: "
            f"value={value}, nodes={self.stats.nodes - nodes_before}"
        )
        return value

    def best_variation(
        self,
        node: Node,
        alpha: Optional[float] = None,
        beta: Optional[float] = None,
    ) -> Tuple[int, List[Any]]:
        """
        Evaluate a node and extract the principal variation.

        The variation follows the first best child at every ply, using the
        same tie-break as best_child, until a terminal node is reached.

        Args:
            node: Root position
            alpha: Lower window edge (default: config.min_score)
            beta: Upper window edge (default: config.max_score)

        Returns:
            Tuple of (score, moves)
                - score: Same as evaluate(node, alpha, beta), a fail-soft
                  bound when the true value lies outside the window
                - moves: Moves from node to the end of the best line. Each
                  ply is chosen by best_child with the full configured
                  window, so this is always the principal line, whatever
                  window the score was searched with
        """
        score = self.evaluate(node, alpha, beta)

        current = node
        while not current.is_terminal():
            current = self.best_child(current)

        return score, list(current.moves[len(node.moves):])

    def best_child(self, node: Node) -> Node:
        """
        Find the best successor of a position.

        Each child is evaluated with the full score window, so the values
        compared here are exact. The first child achieving the extremum is
        kept; later children with the same value do not replace it.

        Args:
            node: Position to move from

        Returns:
            The best child node

        Raises:
            ValueError: If the node is terminal (game over)
            MalformedNodeError: If a non-terminal node has no children
        """
        if node.is_terminal():
            raise ValueError("No legal moves available")

        children = node.children()
        if not children:
            raise MalformedNodeError(f"Non-terminal node has no children: {node!r}")

        maximising = node.is_maximising()
        best_value = -INFINITY if maximising else INFINITY
        best = None

        for child in children:
            value = self._alphabeta(child, self.config.min_score, self.config.max_score)

            if (maximising and value > best_value) or (not maximising and value < best_value):
                best_value = value
                best = child

            logger.debug(f"Move: {child.moves[-1] if child.moves else child!r}, Score: {value}")

        logger.debug(f"Best move: {best.moves[-1] if best.moves else best!r}, Score: {best_value}")
        return best

    def clear_cache(self):
        """Forget every cached position and reset the counters."""
        if self.transposition_table is not None:
            self.transposition_table.clear()
        self.stats.reset()

    def _alphabeta(self, node: Node, alpha: float, beta: float) -> int:
        self.stats.nodes += 1

        # Base case: ground truth only enters here
        if node.is_terminal():
            self.stats.leaves += 1
            return terminal_value(node, self.config.prefer_short_wins)

        if self.transposition_table is None:
            return self._search_children(node, alpha, beta)

        return self.transposition_table.get_or_compute(
            node.search_key(),
            alpha,
            beta,
            lambda a, b: self._search_children(node, a, b),
            depth=node.depth(),
        )

    def _search_children(self, node: Node, alpha: float, beta: float) -> int:
        children = node.children()
        if not children:
            raise MalformedNodeError(f"Non-terminal node has no children: {node!r}")

        if node.is_maximising():
            # Maximizing player (wants highest score)
            best = -INFINITY
            for child in children:
                value = self._alphabeta(child, alpha, beta)
                if value > best:
                    best = value

                # Beta cutoff: minimizing player won't allow this branch
                if best >= beta:
                    self.stats.cutoffs += 1
                    break
                alpha = max(alpha, best)

        else:
            # Minimizing player (wants lowest score)
            best = INFINITY
            for child in children:
                value = self._alphabeta(child, alpha, beta)
                if value < best:
                    best = value

                # Alpha cutoff: maximizing player won't allow this branch
                if best <= alpha:
                    self.stats.cutoffs += 1
                    break
                beta = min(beta, best)

        return best

    def __repr__(self) -> str:
        return f"SearchEngine({self.config!r}, tt={self.transposition_table!r})"
