#!/usr/bin/env python3
"""
Exhaustive Search Verification

Evaluates every reachable tic-tac-toe position with the alpha-beta engine
and compares the value with exhaustive minimax (no pruning). Runs once per
cache policy; with a cache, the table stays warm across positions so
transpositions are answered from earlier searches.

Usage:
    python tools/verify_search.py [--policies none,bounded,exact_only] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game_search.game.tictactoe import TicTacToeNode
from game_search.search.alphabeta import SearchEngine
from game_search.search.config import CACHE_POLICIES, SearchConfig
from game_search.utils.testing import enumerate_positions, summarize, verify_positions


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S',
    )


def config_for_policy(policy: str) -> SearchConfig:
    if policy == "none":
        return SearchConfig(use_cache=False)
    return SearchConfig(cache_policy=policy)


def run_verification(policies: list[str]) -> bool:
    """
    Verify the engine under each cache policy.

    Returns:
        True if every position agreed under every policy
    """
    logger = logging.getLogger(__name__)

    positions = enumerate_positions(TicTacToeNode())
    reference = {}
    logger.info(f"Reachable positions: {len(positions):,}")

    print("=" * 72)
    print(f"{'Policy':<12} {'Correct':<16} {'%':<8} {'Nodes':>12} {'Time':>10}")
    print("-" * 72)

    all_correct = True
    for policy in policies:
        engine = SearchEngine(config_for_policy(policy))
        results = verify_positions(engine, positions, reference, progress=True)
        summary = summarize(results)

        print(
            f"{policy:<12} {summary['correct']}/{summary['total']:<10} "
            f"{summary['percentage']:<7.1f}% {summary['total_nodes']:>12,} "
            f"{summary['total_time']:>9.1f}s"
        )

        for r in results:
            if not r.correct:
                all_correct = False
                logger.error(
                    f"[{policy}] mismatch at {r.node.position()!r}: "
                    f"expected {r.expected}, got {r.found}"
                )

    print("=" * 72)
    return all_correct


def main():
    parser = argparse.ArgumentParser(
        description="Check alpha-beta against exhaustive minimax on every position"
    )
    parser.add_argument(
        "--policies",
        type=str,
        default=",".join(["none", *CACHE_POLICIES]),
        help="Comma-separated cache policies to verify (default: none,bounded,exact_only)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    policies = [p.strip() for p in args.policies.split(",")]
    unknown = [p for p in policies if p not in ("none", *CACHE_POLICIES)]
    if unknown:
        print(f"Error: unknown cache policies: {', '.join(unknown)}")
        sys.exit(1)

    try:
        ok = run_verification(policies)
    except KeyboardInterrupt:
        print("\n\nVerification interrupted by user")
        sys.exit(1)

    if not ok:
        print("Verification FAILED")
        sys.exit(1)
    print("All positions verified")


if __name__ == "__main__":
    main()
