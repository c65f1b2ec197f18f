"""
Players Module

Move selection for the game runner.

Key Components:
    - Player (ABC): next_move(state) -> Position
    - AutoPlayer: Alpha-beta search through a SearchEngine
    - InteractivePlayer: Reads row/column pairs from stdin
"""

from game_search.players.auto import AutoPlayer
from game_search.players.base import Player
from game_search.players.interactive import InteractivePlayer, parse_move

__all__ = ['Player', 'AutoPlayer', 'InteractivePlayer', 'parse_move']
