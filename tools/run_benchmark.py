#!/usr/bin/env python3
"""
Search Benchmark Runner

Measures how much work the engine does from the empty board and over a few
engine-vs-engine games, for each cache policy. The alpha-beta value is
the same in every configuration; only nodes and time change.

Usage:
    python tools/run_benchmark.py [--games 3] [--verbose]
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from tqdm import tqdm

from game_search.game.tictactoe import TicTacToeNode
from game_search.players.auto import AutoPlayer
from game_search.play.interface import GameRunner
from game_search.search.alphabeta import SearchEngine
from game_search.search.config import CACHE_POLICIES, SearchConfig
import time


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def make_config(policy: str) -> SearchConfig:
    if policy == "none":
        return SearchConfig(use_cache=False)
    return SearchConfig(cache_policy=policy)


def run_benchmark(games: int, verbose: bool = False):
    """
    Benchmark each cache policy.

    Args:
        games: Number of engine-vs-engine games to play per policy
        verbose: If True, print the value of every opening move
    """
    print("=" * 80)
    print("ALPHA-BETA BENCHMARK - tic-tac-toe")
    print("=" * 80)

    all_results = []
    for policy in ["none", *CACHE_POLICIES]:
        engine = SearchEngine(make_config(policy))
        root = TicTacToeNode()

        start_time = time.time()
        value = engine.evaluate(root)
        root_time = time.time() - start_time
        root_nodes = engine.stats.nodes

        if verbose:
            for child in root.children():
                print(f"  [{policy}] {child.last_move}: {engine.evaluate(child)}")

        # Self-play: both sides share one engine, the table stays warm
        start_time = time.time()
        outcomes = []
        for _ in tqdm(range(games), desc=f"Self-play ({policy})", leave=False):
            player = AutoPlayer(engine)
            runner = GameRunner(player, player, output_fn=lambda _: None)
            runner.run()
            outcomes.append(runner.result())
        games_time = time.time() - start_time

        tt = engine.transposition_table
        hits = tt.hits if tt is not None else 0
        lookups = (tt.hits + tt.misses) if tt is not None else 0

        all_results.append({
            'policy': policy,
            'value': value,
            'root_nodes': root_nodes,
            'root_time': root_time,
            'total_nodes': engine.stats.nodes,
            'cutoffs': engine.stats.cutoffs,
            'games_time': games_time,
            'outcomes': outcomes,
            'tt_hit_rate': 100 * hits / lookups if lookups > 0 else 0,
            'tt_entries': len(tt) if tt is not None else 0,
        })

    print(f"{'Policy':<12} {'Value':<7} {'Root nodes':>12} {'Root time':>10} "
          f"{'Total nodes':>12} {'Cutoffs':>9} {'TT entries':>11} {'TT Hit %':>9}")
    print("-" * 80)
    for r in all_results:
        print(f"{r['policy']:<12} {r['value']:<7} {r['root_nodes']:>12,} {format_time(r['root_time']):>10} "
              f"{r['total_nodes']:>12,} {r['cutoffs']:>9,} {r['tt_entries']:>11,} {r['tt_hit_rate']:>8.1f}%")
    print("=" * 80)

    for r in all_results:
        print(f"{r['policy']}: {games} self-play games in {format_time(r['games_time'])}, "
              f"results: {', '.join(sorted(set(r['outcomes'])))}")

    print("\n" + "=" * 80)
    print("Benchmark complete!")
    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the alpha-beta engine under each cache policy"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=3,
        help="Self-play games per policy (default: 3)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the value of every opening move"
    )

    args = parser.parse_args()

    try:
        run_benchmark(args.games, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\nError running benchmark: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
