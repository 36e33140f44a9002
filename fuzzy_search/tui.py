from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import Key, Paste
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from fuzzy_search.models import FuzzyMatchOptions, FuzzySearchResult
from fuzzy_search.rendering import highlight_matches
from fuzzy_search.search import fuzzy_search


class FuzzyPickerTui(App[str | None]):
    CSS_PATH = "picker.tcss"
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+c", "quit", show=False),
    ]

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        initial_query: str = "",
        options: FuzzyMatchOptions | None = None,
    ) -> None:
        super().__init__()
        self._candidates: list[str] = list(candidates)
        self._match_options = options or FuzzyMatchOptions()
        self._search_query = initial_query
        self._visible_results: list[FuzzySearchResult] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="picker"):
            yield Static(self._query_indicator_text(), id="query")
            yield OptionList(id="candidate-list")
            yield Static("", id="status")

    def on_mount(self) -> None:
        self.query_one("#candidate-list", OptionList).focus()
        self._filter_candidates()

    def _filter_candidates(self) -> None:
        if not self._search_query.strip():
            self._visible_results = [
                FuzzySearchResult(
                    score=0.0, matches=(), source=source, source_index=index
                )
                for index, source in enumerate(self._candidates)
            ]
        else:
            self._visible_results = fuzzy_search(
                self._search_query, self._candidates, self._match_options
            )
        self._render_candidate_options()
        self._update_status()

    def _render_candidate_options(self) -> None:
        candidate_list = self.query_one("#candidate-list", OptionList)
        candidate_list.clear_options()
        if not self._visible_results:
            candidate_list.add_option(Option("No matches", disabled=True))
            return
        candidate_list.add_options(
            [
                highlight_matches(result.source, result.matches)
                for result in self._visible_results
            ]
        )
        candidate_list.action_first()

    def _status_text(self) -> str:
        return f"{len(self._visible_results)} of {len(self._candidates)} candidates"

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(self._status_text())

    def _query_indicator_text(self) -> Text:
        indicator = Text("> ", style="bold red")
        indicator.append(f"{self._search_query}_", style="bold white")
        return indicator

    def _update_query_indicator(self) -> None:
        self.query_one("#query", Static).update(self._query_indicator_text())

    def _set_search_query(self, query: str) -> None:
        self._search_query = query
        self._filter_candidates()
        self._update_query_indicator()

    def action_cancel(self) -> None:
        self.exit(None)

    def on_key(self, event: Key) -> None:
        if event.key == "backspace":
            self._set_search_query(self._search_query[:-1])
            event.stop()
            return

        if event.key == "space":
            self._set_search_query(self._search_query + " ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._set_search_query(self._search_query + event.character)
            event.stop()

    def on_paste(self, event: Paste) -> None:
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._set_search_query(self._search_query + sanitized)
        event.stop()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "candidate-list":
            return
        if event.option_index < 0 or event.option_index >= len(
            self._visible_results
        ):
            return
        self.exit(self._visible_results[event.option_index].source)
