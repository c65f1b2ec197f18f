"""
Search Module

This module implements the game tree search. The algorithm is minimax with
alpha-beta pruning, optionally backed by a transposition table that caches
previously searched positions together with the window they were searched in.

Key Components:
    - SearchEngine: Alpha-beta evaluator, best variation and best move
    - SearchConfig: Score window, cache policy and depth preference
    - TranspositionTable: Position cache with EXACT/LOWER/UPPER entries
    - terminal_value: Depth-adjusted terminal score

"""

from game_search.search.alphabeta import SearchEngine, SearchStats, terminal_value
from game_search.search.config import SearchConfig
from game_search.search.transposition import NodeType, TranspositionTable

__all__ = [
    'SearchEngine',
    'SearchStats',
    'SearchConfig',
    'TranspositionTable',
    'NodeType',
    'terminal_value',
]
