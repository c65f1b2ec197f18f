"""
game_search: Alpha-Beta Game Tree Search

A generic minimax search core with alpha-beta pruning and an optional
transposition table, usable by any finite, two-player, zero-sum game with
perfect information. Tic-tac-toe is shipped as the reference game.

## Architecture

The package is organized into several key modules:

1. **game**: Node abstraction and game adapters
   - Abstract Node interface (children, terminal test, score, side to move)
   - Fatal InvariantViolation errors for broken contracts
   - TicTacToeState / TicTacToeNode: 3x3 tic-tac-toe

2. **search**: Search algorithms
   - Minimax with alpha-beta pruning (fail-soft)
   - Transposition table with EXACT / LOWER_BOUND / UPPER_BOUND entries
   - Depth-adjusted scores: quickest win, slowest loss

3. **players**: Move selection
   - AutoPlayer: best child according to the engine
   - InteractivePlayer: row/column input from stdin

4. **play**: Command-line game runner

5. **utils**: Verification utilities
   - Exhaustive minimax reference
   - Reachable position enumeration

## Quick Start

### As a Python Library

```python
from game_search.game import TicTacToeNode
from game_search.search import SearchEngine

engine = SearchEngine()
root = TicTacToeNode()

score, line = engine.best_variation(root)
print(f"Value: {score}, best line: {[str(m) for m in line]}")
```

### From the Terminal

```bash
python -m game_search.play --x human --o auto
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from game_search.game import Node, TicTacToeNode, TicTacToeState
from game_search.search import SearchConfig, SearchEngine, TranspositionTable

__all__ = [
    'Node',
    'TicTacToeNode',
    'TicTacToeState',
    'SearchEngine',
    'SearchConfig',
    'TranspositionTable',
]
