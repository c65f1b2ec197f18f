"""
Main entry point for playing tic-tac-toe from the terminal.

Usage:
    python -m game_search.play --x human --o auto
"""

from game_search.play.interface import main

if __name__ == "__main__":
    main()
