from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from fuzzy_search import __version__
from fuzzy_search.models import FuzzyMatchOptions
from fuzzy_search.rendering import debug_fuzzy_match, render_search_result
from fuzzy_search.search import fuzzy_search
from fuzzy_search.tui import FuzzyPickerTui

__all__ = [
    "FuzzyPickerTui",
    "cli",
    "run",
]

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fuzzy-search {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_candidates(candidates: list[str] | None, file: Path | None) -> list[str]:
    if candidates:
        return list(candidates)
    if file is not None:
        lines = file.read_text(encoding="utf-8").splitlines()
    else:
        lines = typer.get_text_stream("stdin").read().splitlines()
    return [line for line in lines if line.strip()]


cli = typer.Typer(
    add_completion=False,
    help="Rank candidate strings by how well they fuzzy-match a query.",
)


@cli.command()
def run(
    query: str | None = typer.Argument(
        None,
        help="Query to match. Optional with --interactive.",
        show_default=False,
    ),
    candidates: list[str] | None = typer.Argument(
        None,
        help="Candidates to rank. Read from --file or stdin when omitted.",
        show_default=False,
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read candidates from a file, one per line.",
    ),
    token_score_bias: float = typer.Option(
        10.0,
        "--token-score-bias",
        "-b",
        envvar="FUZZY_SEARCH_TOKEN_SCORE_BIAS",
        help="Multiplier applied to token-aligned match scores.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show at most this many results.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        "-s",
        help="Print the score next to each result.",
    ),
    explain: bool = typer.Option(
        False,
        "--explain",
        help="Print how the query matches every candidate instead of ranking.",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help=(
            "Pick a candidate interactively and print the selection. "
            "Needs a terminal, so pass candidates as arguments or with --file "
            "rather than piping them through stdin."
        ),
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)
    try:
        options = FuzzyMatchOptions(token_score_bias=token_score_bias)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if query is None and not interactive:
        raise typer.BadParameter(
            "A query is required.",
            param_hint="QUERY",
        )

    sources = _read_candidates(candidates, file)
    logger.debug("Loaded %d candidates", len(sources))

    if interactive:
        selected = FuzzyPickerTui(
            sources, initial_query=query or "", options=options
        ).run()
        if selected is None:
            raise typer.Exit(code=1)
        typer.echo(selected)
        return

    assert query is not None
    console = Console(highlight=False)
    if explain:
        matched = False
        for source in sources:
            match = debug_fuzzy_match(query, source, options=options, console=console)
            matched = matched or match.score > 0
        if not matched:
            raise typer.Exit(code=1)
        return

    results = fuzzy_search(query, sources, options)
    if not results:
        raise typer.Exit(code=1)
    for result in results[:limit]:
        console.print(render_search_result(result, show_score=scores), soft_wrap=True)


if __name__ == "__main__":
    cli()
