from __future__ import annotations

from fuzzy_search.match import (
    fuzzy_match,
    match_by_tokens,
    match_by_wildcard,
    match_score,
    next_token_start,
    token_starts,
)
from fuzzy_search.models import FuzzyMatchOptions, FuzzyMatchResult, FuzzySearchResult
from fuzzy_search.rendering import (
    debug_fuzzy_match,
    highlight_matches,
    render_search_result,
)
from fuzzy_search.search import fuzzy_search

__version__ = "0.1.0"

__all__ = [
    "FuzzyMatchOptions",
    "FuzzyMatchResult",
    "FuzzySearchResult",
    "__version__",
    "debug_fuzzy_match",
    "fuzzy_match",
    "fuzzy_search",
    "highlight_matches",
    "match_by_tokens",
    "match_by_wildcard",
    "match_score",
    "next_token_start",
    "render_search_result",
    "token_starts",
]
