import logging

import pytest

from fuzzy_search import FuzzyMatchOptions, FuzzySearchResult, fuzzy_search

CANDIDATES = [
    "DOM.getText",
    "DOM.getInnerText",
    "DOM.getTextContent",
    "DOM.queryAll",
    "DOM.queryOne",
    "DOM.batchExtract",
    "Value.containsText",
    "Value.equalsText",
    "String.extractRegexp",
]


def _highlight(source: str, matches: tuple[int, ...]) -> str:
    return "".join(
        char.upper() if index in matches else char.lower()
        for index, char in enumerate(source)
    )


def test_search_text_ranks_token_matches_first() -> None:
    results = fuzzy_search("text", CANDIDATES)

    assert [result.source for result in results] == [
        "DOM.getText",
        "DOM.getTextContent",
        "DOM.getInnerText",
        "Value.equalsText",
        "Value.containsText",
        "String.extractRegexp",
        "DOM.batchExtract",
    ]
    assert [_highlight(result.source, result.matches) for result in results] == [
        "dom.getTEXT",
        "dom.getTEXTcontent",
        "dom.getinnerTEXT",
        "value.equalsTEXT",
        "value.containsTEXT",
        "sTring.EXTractregexp",
        "dom.baTchEXTract",
    ]


def test_search_qall_matches_camel_case_components() -> None:
    results = fuzzy_search("qall", CANDIDATES)

    assert [_highlight(result.source, result.matches) for result in results] == [
        "dom.QueryALL",
    ]


def test_search_aas_falls_back_to_wildcard() -> None:
    results = fuzzy_search("aas", CANDIDATES)

    assert [result.source for result in results] == [
        "Value.equalsText",
        "Value.containsText",
    ]
    assert [_highlight(result.source, result.matches) for result in results] == [
        "vAlue.equAlStext",
        "vAlue.contAinStext",
    ]


def test_search_token_match_beats_wildcard_match() -> None:
    results = fuzzy_search("text", ["DOM.batchExtract", "DOM.getText"])

    assert [result.source for result in results] == [
        "DOM.getText",
        "DOM.batchExtract",
    ]


def test_search_results_keep_source_index() -> None:
    results = fuzzy_search("text", CANDIDATES)

    for result in results:
        assert CANDIDATES[result.source_index] == result.source
    assert results[0] == FuzzySearchResult(
        score=results[0].score,
        matches=(7, 8, 9, 10),
        source="DOM.getText",
        source_index=0,
    )


@pytest.mark.parametrize("query", ["text", "aas", "d", "gt", "xyz", ""])
def test_search_never_returns_non_matches(query: str) -> None:
    results = fuzzy_search(query, CANDIDATES)

    assert all(result.score > 0 for result in results)
    assert all(result.matches for result in results)


@pytest.mark.parametrize("query", ["text", "aas", "o", "et"])
def test_search_results_are_sorted(query: str) -> None:
    results = fuzzy_search(query, CANDIDATES)

    for previous, current in zip(results, results[1:]):
        assert previous.score >= current.score
        if previous.score == current.score:
            assert previous.source <= current.source


def test_search_breaks_ties_by_case_sensitive_source() -> None:
    results = fuzzy_search("t", ["bt", "at", "Bt"])

    assert len({result.score for result in results}) == 1
    assert [result.source for result in results] == ["Bt", "at", "bt"]


def test_search_keeps_input_order_for_duplicate_sources() -> None:
    results = fuzzy_search("ab", ["xab", "zzz", "xab"])

    assert [result.source_index for result in results] == [0, 2]


def test_search_order_does_not_depend_on_input_order() -> None:
    forward = fuzzy_search("text", CANDIDATES)
    backward = fuzzy_search("text", list(reversed(CANDIDATES)))

    assert [result.source for result in forward] == [
        result.source for result in backward
    ]


def test_search_empty_inputs() -> None:
    assert fuzzy_search("", CANDIDATES) == []
    assert fuzzy_search("text", []) == []


def test_search_bias_changes_ranking() -> None:
    candidates = ["String.extractRegexp", "Value.containsText"]

    biased = fuzzy_search("text", candidates)
    unbiased = fuzzy_search("text", candidates, FuzzyMatchOptions(token_score_bias=1))

    assert [result.source for result in biased] == [
        "Value.containsText",
        "String.extractRegexp",
    ]
    assert [result.source for result in unbiased] == [
        "String.extractRegexp",
        "Value.containsText",
    ]


def test_search_logs_match_count(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="fuzzy_search.search"):
        fuzzy_search("text", CANDIDATES)

    assert "Query 'text' matched 7 of 9 candidates" in caplog.messages
