from __future__ import annotations

import logging
from collections.abc import Sequence

from fuzzy_search.match import fuzzy_match
from fuzzy_search.models import FuzzyMatchOptions, FuzzySearchResult

logger = logging.getLogger(__name__)


def search_sort_key(result: FuzzySearchResult) -> tuple[float, str]:
    return (-result.score, result.source)


def fuzzy_search(
    query: str,
    sources: Sequence[str],
    options: FuzzyMatchOptions | None = None,
) -> list[FuzzySearchResult]:
    """Match every source against the query, best score first, ties by source text."""
    if options is None:
        options = FuzzyMatchOptions()

    results: list[FuzzySearchResult] = []
    for source_index, source in enumerate(sources):
        match = fuzzy_match(query, source, options)
        if match.score > 0:
            results.append(
                FuzzySearchResult(
                    score=match.score,
                    matches=match.matches,
                    source=source,
                    source_index=source_index,
                )
            )

    results.sort(key=search_sort_key)
    logger.debug(
        "Query %r matched %d of %d candidates", query, len(results), len(sources)
    )
    return results
