from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.events import Key, Paste, Resize
from textual.widgets import OptionList, Static

from matchr.models import PickerMode, ScoredItem
from matchr.ranking import filter_items
from matchr.rendering import MATCH_STYLE, format_status, highlight_match
from matchr.search import match_positions


class PickerTui(App[str | None]):
    CSS_PATH = "picker.tcss"
    ENABLE_COMMAND_PALETTE = False
    BINDINGS = [
        Binding("f", "filter_key_f", "Filter"),
        Binding("slash", "filter_key_slash", show=False),
        Binding("escape", "escape", "Back", show=False),
        Binding("q", "quit_or_type_q", "Quit"),
        Binding("ctrl+c", "quit", show=False),
    ]

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        query: str = "",
        min_score: int = 1,
    ) -> None:
        super().__init__()
        self.theme = "rose-pine"
        self._all_candidates: list[str] = list(candidates)
        self._min_score = min_score
        self._search_query = query
        self._mode: PickerMode = "filter" if query else "browse"
        self._visible_results: list[ScoredItem] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="sidebar"):
            yield OptionList(id="results")
            yield Static("", id="status")

    def on_mount(self) -> None:
        self.query_one("#results", OptionList).focus()
        self._filter_candidates()
        self._update_filter_indicator()

    def _rank_candidates(self) -> list[ScoredItem]:
        if not self._search_query:
            return [(candidate, 0) for candidate in self._all_candidates]
        return filter_items(
            self._search_query,
            self._all_candidates,
            min_score=self._min_score,
        )

    def _filter_candidates(self) -> None:
        self._visible_results = self._rank_candidates()
        self._render_result_options()
        self._update_status()

    def _render_result_options(self, *, preserve_position: bool = False) -> None:
        result_list = self.query_one("#results", OptionList)
        previous_highlight = result_list.highlighted
        result_list.clear_options()
        if not self._visible_results:
            result_list.add_option("No candidates match the current query.")
            return

        result_list.add_options(
            [self._result_label(item) for item, _ in self._visible_results]
        )
        if preserve_position and previous_highlight is not None:
            result_list.highlighted = min(
                previous_highlight, len(self._visible_results) - 1
            )
        else:
            result_list.action_first()

    def _result_label(self, item: str) -> Text:
        positions = match_positions(self._search_query, item)
        return highlight_match(item, positions or ())

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(
            format_status(len(self._visible_results), len(self._all_candidates))
        )

    def _filter_indicator_text(self) -> Text:
        indicator = Text()
        if self._mode == "filter":
            indicator.append("f", style=MATCH_STYLE)
            indicator.append(f" {self._search_query}_", style="bold white")
        else:
            indicator.append("filter", style="dim")
            indicator.stylize(MATCH_STYLE, 0, 1)
        return indicator

    def _update_filter_indicator(self) -> None:
        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.border_title = self._filter_indicator_text()

    def _set_filter_mode(self, enabled: bool, *, reset_query: bool) -> None:
        self._mode = "filter" if enabled else "browse"
        if reset_query:
            self._search_query = ""
            self._filter_candidates()
        self._update_filter_indicator()

    def _set_query(self, query: str) -> None:
        self._search_query = query
        self._filter_candidates()
        self._update_filter_indicator()

    def _append_filter_char(self, char: str) -> None:
        self._set_query(self._search_query + char)

    def _type_or_enter_filter(self, char: str) -> None:
        if self._mode != "filter":
            self._set_filter_mode(True, reset_query=True)
            return
        self._append_filter_char(char)

    def action_filter_key_f(self) -> None:
        self._type_or_enter_filter("f")

    def action_filter_key_slash(self) -> None:
        self._type_or_enter_filter("/")

    def action_quit_or_type_q(self) -> None:
        if self._mode == "filter":
            self._append_filter_char("q")
            return
        self.exit(None)

    def action_escape(self) -> None:
        if self._mode == "filter":
            self._set_filter_mode(False, reset_query=True)

    def on_key(self, event: Key) -> None:
        if self._mode != "filter":
            return

        # These keys are handled by explicit bindings to avoid duplicate input.
        if event.key in {"f", "slash", "q"}:
            return

        if event.key == "backspace":
            self._set_query(self._search_query[:-1])
            event.stop()
            return

        if event.key == "space":
            self._append_filter_char(" ")
            event.stop()
            return

        if event.character and event.character.isprintable():
            self._append_filter_char(event.character)
            event.stop()
            return

    def on_paste(self, event: Paste) -> None:
        if self._mode != "filter":
            return
        sanitized = event.text.replace("\r", "").replace("\n", "")
        if not sanitized:
            return
        self._append_filter_char(sanitized)
        event.stop()

    def on_resize(self, event: Resize) -> None:
        del event
        self.call_after_refresh(self._refresh_after_resize)

    def _refresh_after_resize(self) -> None:
        self._render_result_options(preserve_position=True)
        self._update_filter_indicator()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "results":
            return
        if event.option_index < 0 or event.option_index >= len(
            self._visible_results
        ):
            return
        self.exit(self._visible_results[event.option_index][0])
