from __future__ import annotations

import math
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from fuzzy_search.match import fuzzy_match
from fuzzy_search.models import FuzzyMatchOptions, FuzzyMatchResult, FuzzySearchResult

MATCH_STYLE = "bold yellow"


def format_score(score: float) -> str:
    if math.isinf(score):
        return "inf"
    return f"{score:.4f}"


def highlight_matches(
    source: str, matches: Iterable[int], *, style: str = MATCH_STYLE
) -> Text:
    text = Text(source)
    for index in matches:
        text.stylize(style, index, index + 1)
    return text


def render_search_result(
    result: FuzzySearchResult, *, show_score: bool = False
) -> Text:
    text = highlight_matches(result.source, result.matches)
    if show_score:
        text.append(f"  {format_score(result.score)}", style="dim")
    return text


def debug_fuzzy_match(
    query: str,
    source: str,
    *,
    options: FuzzyMatchOptions | None = None,
    console: Console | None = None,
) -> FuzzyMatchResult:
    """Print the query, the candidate and the highlighted match with its score."""
    if console is None:
        console = Console()

    match = fuzzy_match(query, source, options)
    console.print(Text.assemble("Query: ", (query, "green")))
    console.print(Text.assemble("Candidate: ", (source, "green")))
    if match.score == 0:
        console.print(Text.assemble("Result: ", ("no match", "red")))
        return match
    console.print(
        Text.assemble(
            "Result: ",
            highlight_matches(source, match.matches),
            f" (score: {format_score(match.score)})",
        )
    )
    return match
