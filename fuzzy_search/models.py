from __future__ import annotations

import math
from dataclasses import dataclass

MatchPositions = tuple[int, ...]


@dataclass(frozen=True)
class FuzzyMatchOptions:
    token_score_bias: float = 10.0

    def __post_init__(self) -> None:
        bias = self.token_score_bias
        if isinstance(bias, bool) or not isinstance(bias, (int, float)):
            raise ValueError(f"token_score_bias must be a number, got {bias!r}")
        if not math.isfinite(bias) or bias <= 0:
            raise ValueError(f"token_score_bias must be positive, got {bias!r}")


@dataclass(frozen=True)
class FuzzyMatchResult:
    """Score (higher is better, 0 means no match) and matched source indices."""

    score: float
    matches: MatchPositions


@dataclass(frozen=True)
class FuzzySearchResult:
    score: float
    matches: MatchPositions
    # Candidate string that matched and its index in the searched list.
    source: str
    source_index: int
