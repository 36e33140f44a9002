"""Token-aware fuzzy matching of a query against a single candidate.

Matching runs in two passes. ``match_by_tokens`` only starts a match at the
beginning of a token (a word, or a component of a camelCase/snake_case
symbol) and then keeps matching contiguously from there. When that fails,
``match_by_wildcard`` looks for the query characters anywhere in order,
like ``*t*e*x*t*``. Both passes are scored the same way, and token matches
are multiplied by ``FuzzyMatchOptions.token_score_bias`` so they outrank
wildcard matches of similar quality.
"""

from __future__ import annotations

import math
import re
from bisect import bisect_right
from collections.abc import Sequence

from fuzzy_search.models import FuzzyMatchOptions, FuzzyMatchResult

TOKEN_PATTERN = re.compile(r"[a-z][a-z0-9]*(?=[A-Z]|\b|_)|[A-Z][a-z0-9]*", re.ASCII)
_WHITESPACE = re.compile(r"\s+")

NO_MATCH = FuzzyMatchResult(score=0.0, matches=())


def normalize_query(query: str) -> str:
    return _WHITESPACE.sub("", query.lower())


def token_starts(source: str) -> list[int]:
    """Offsets of every token start in ``source``, in ascending order."""
    return [match.start() for match in TOKEN_PATTERN.finditer(source)]


def next_token_start(
    source: str, index: int, *, starts: Sequence[int] | None = None
) -> int | None:
    """First token start strictly after ``index``, or None past the last token.

    Without ``starts`` the whole source is tokenized on every call; pass the
    result of ``token_starts(source)`` when scanning the same source repeatedly.
    """
    if starts is None:
        starts = token_starts(source)
    position = bisect_right(starts, index)
    if position == len(starts):
        return None
    return starts[position]


def _lower_aligned(source: str) -> str:
    # Characters whose lower case is longer than one code point (e.g. "İ")
    # stay as they are so indices keep pointing into ``source``.
    chars: list[str] = []
    for char in source:
        lowered = char.lower()
        chars.append(lowered if len(lowered) == 1 else char)
    return "".join(chars)


def match_score(source: str, matches: Sequence[int]) -> float:
    """Score matched indices of ``source``; matches near the start score higher.

    The result is ``n / (S - n / L)`` where ``n`` is the number of matches,
    ``S`` their index sum and ``L`` the source length. The denominator only
    drops to zero or below when the matches sit on the very start of the
    source, which is the best alignment there is, so that scores infinity.
    """
    n = len(matches)
    if n == 0:
        return 0.0
    denominator = sum(matches) - n / len(source)
    if denominator <= 0:
        return math.inf
    return n / denominator


def match_by_tokens(query: str, source: str) -> FuzzyMatchResult:
    """Match each query character at a token start or right after a previous match.

    On a mismatch the cursor jumps to the next token start, so the query
    character can only resume matching at the beginning of a later token.
    """
    letters = normalize_query(query)
    if not letters:
        return NO_MATCH

    starts = token_starts(source)
    matches: list[int] = []
    cursor = 0
    position = 0
    while position < len(letters):
        if cursor >= len(source):
            return NO_MATCH
        if letters[position] == source[cursor].lower():
            matches.append(cursor)
            cursor += 1
            position += 1
            continue
        next_start = next_token_start(source, cursor, starts=starts)
        cursor = len(source) if next_start is None else next_start

    return FuzzyMatchResult(score=match_score(source, matches), matches=tuple(matches))


def match_by_wildcard(query: str, source: str) -> FuzzyMatchResult:
    """Find the query characters left to right anywhere in ``source``."""
    letters = normalize_query(query)
    if not letters:
        return NO_MATCH

    source_lowercased = _lower_aligned(source)
    matches: list[int] = []
    search_from = 0
    for letter in letters:
        index = source_lowercased.find(letter, search_from)
        if index == -1:
            return NO_MATCH
        matches.append(index)
        search_from = index + 1

    return FuzzyMatchResult(score=match_score(source, matches), matches=tuple(matches))


def fuzzy_match(
    query: str,
    source: str,
    options: FuzzyMatchOptions | None = None,
) -> FuzzyMatchResult:
    """Match by tokens, falling back to a wildcard match with an unbiased score."""
    if options is None:
        options = FuzzyMatchOptions()

    token_match = match_by_tokens(query, source)
    if token_match.score > 0:
        return FuzzyMatchResult(
            score=token_match.score * options.token_score_bias,
            matches=token_match.matches,
        )
    return match_by_wildcard(query, source)
