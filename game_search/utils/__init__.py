"""
Utilities Module

This module provides verification helpers for the search engine.

Key Components:
    - minimax_value: Exhaustive minimax without pruning (reference values)
    - enumerate_positions: Every distinct position reachable from a root
    - verify_positions: Engine vs. reference comparison suite

Success Metric:
    Alpha-beta agrees with exhaustive minimax on all 5478 reachable
    tic-tac-toe positions, with and without a warm transposition table.
"""

from game_search.utils.testing import (
    VerificationResult,
    enumerate_positions,
    minimax_value,
    summarize,
    verify_positions,
)

__all__ = [
    'VerificationResult',
    'minimax_value',
    'enumerate_positions',
    'verify_positions',
    'summarize',
]
