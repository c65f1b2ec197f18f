"""
Search configuration for the alpha-beta engine.
"""

from dataclasses import dataclass

CACHE_POLICIES = ("bounded", "exact_only")


@dataclass
class SearchConfig:
    """Configuration for one SearchEngine instance.

    The defaults fit 3x3 tic-tac-toe: terminal scores lie in [-10, 10].
    """

    # Score window
    min_score: int = -10
    """Theoretical minimum score, the default alpha"""

    max_score: int = 10
    """Theoretical maximum score, the default beta"""

    # Transposition table
    use_cache: bool = True
    """Memoize subtree values in a transposition table"""

    cache_policy: str = "bounded"
    """'bounded': store every value with an EXACT/LOWER/UPPER flag.
    'exact_only': store only values that fell strictly inside their window"""

    cache_max_size: int = 1_000_000
    """Maximum number of cached positions before the oldest is evicted"""

    # Scoring
    prefer_short_wins: bool = True
    """Shrink terminal scores by depth so quicker wins and slower losses score higher"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.min_score >= self.max_score:
            raise ValueError(
                f"min_score must be below max_score, got {self.min_score} >= {self.max_score}"
            )

        if self.cache_policy not in CACHE_POLICIES:
            raise ValueError(
                f"cache_policy should be one of {', '.join(CACHE_POLICIES)}, got {self.cache_policy!r}"
            )

        if self.cache_max_size <= 0:
            raise ValueError(f"cache_max_size must be positive, got {self.cache_max_size}")

    def __repr__(self) -> str:
        cache = f"{self.cache_policy}, max {self.cache_max_size:,}" if self.use_cache else "off"
        return (
            f"SearchConfig(window=[{self.min_score}, {self.max_score}], "
            f"cache={cache}, prefer_short_wins={self.prefer_short_wins})"
        )
