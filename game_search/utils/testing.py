"""
Search Verification Utilities

This module provides reference implementations and verification suites for
checking the alpha-beta engine against exhaustive minimax.

Reference:
    minimax_value() explores every child of every node, without pruning and
    without windows. Its optional memo is keyed by node.search_key(): values
    carry the depth adjustment of their terminal leaves, so a position
    reached at two different plies gets two entries. Pass memo=None for a
    reference that shares no assumption with the engine cache.

Verification:
    verify_positions() evaluates each position with the engine under the
    unbounded window (-inf, +inf) and compares it with the reference value.
    Alpha-beta must never change the value, only the number of nodes.

Typical use:
    >>> root = TicTacToeNode()
    >>> positions = enumerate_positions(root)      # 5478 positions
    >>> results = verify_positions(SearchEngine(), positions)
    >>> all(r.correct for r in results)
    True
"""

import time
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional

from tqdm import tqdm

from game_search.game.base import MalformedNodeError, Node
from game_search.search.alphabeta import INFINITY, SearchEngine, terminal_value


@dataclass
class VerificationResult:
    """
    Result of checking a single position.

    Attributes:
        node: The position checked
        expected: Exhaustive minimax value
        found: Value returned by the engine
        correct: Whether both agree
        nodes_searched: Nodes the engine visited for this position
        time_taken: Time spent in the engine (seconds)
    """
    node: Node
    expected: int
    found: int
    correct: bool
    nodes_searched: int = 0
    time_taken: float = 0.0


def minimax_value(
    node: Node,
    prefer_short_wins: bool = True,
    memo: Optional[Dict[Hashable, int]] = None,
) -> int:
    """
    Exhaustive minimax value, no pruning.

    Args:
        node: Position to evaluate
        prefer_short_wins: Apply the same depth adjustment as the engine
        memo: Optional search key → value dictionary shared across calls

    Returns:
        int: True minimax value of the position
    """
    if node.is_terminal():
        return terminal_value(node, prefer_short_wins)

    key = node.search_key()
    if memo is not None and key in memo:
        return memo[key]

    children = node.children()
    if not children:
        raise MalformedNodeError(f"Non-terminal node has no children: {node!r}")

    values = [minimax_value(child, prefer_short_wins, memo) for child in children]
    value = max(values) if node.is_maximising() else min(values)

    if memo is not None:
        memo[key] = value
    return value


def enumerate_positions(root: Node) -> List[Node]:
    """
    Every distinct position reachable from root, root first.

    Positions are told apart by search key, so a position reached at two
    different plies is listed twice. Transpositions at the same ply are
    listed once, with the move history of the first path that reached
    them (depth-first, enumeration order).
    """
    seen = {root.search_key()}
    positions = [root]
    stack = [root]

    while stack:
        node = stack.pop()
        for child in node.children():
            key = child.search_key()
            if key not in seen:
                seen.add(key)
                positions.append(child)
                stack.append(child)

    return positions


def verify_positions(
    engine: SearchEngine,
    positions: List[Node],
    reference: Optional[Dict[Hashable, int]] = None,
    progress: bool = False,
) -> List[VerificationResult]:
    """
    Compare engine values with exhaustive minimax on a list of positions.

    Args:
        engine: Engine under test (its cache, if any, stays warm across positions)
        positions: Positions to check
        reference: Memo for minimax_value, filled as needed
        progress: Show a tqdm progress bar

    Returns:
        List of VerificationResult, one per position
    """
    if reference is None:
        reference = {}

    results = []
    for node in tqdm(positions, desc="Verifying positions", disable=not progress, leave=False):
        expected = minimax_value(node, engine.config.prefer_short_wins, reference)

        nodes_before = engine.stats.nodes
        start_time = time.time()
        found = engine.evaluate(node, -INFINITY, INFINITY)
        time_taken = time.time() - start_time

        results.append(VerificationResult(
            node=node,
            expected=expected,
            found=found,
            correct=found == expected,
            nodes_searched=engine.stats.nodes - nodes_before,
            time_taken=time_taken,
        ))

    return results


def summarize(results: List[VerificationResult]) -> Dict[str, int | float]:
    """Aggregate counters over verification results."""
    total = len(results)
    correct = sum(1 for r in results if r.correct)
    total_nodes = sum(r.nodes_searched for r in results)
    total_time = sum(r.time_taken for r in results)

    return {
        'total': total,
        'correct': correct,
        'percentage': (correct / total * 100) if total > 0 else 0,
        'total_nodes': total_nodes,
        'total_time': total_time,
    }
