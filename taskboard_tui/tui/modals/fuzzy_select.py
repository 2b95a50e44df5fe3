"""Generic fzf-style select modal driven by a SearchSession."""

from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.timer import Timer
from textual.widgets import Input, ListItem, ListView, Static

from ...search import (
    DEFAULT_LIMIT,
    DEFAULT_WEIGHTS,
    Candidate,
    HighlightRun,
    RenderEntry,
    ScoringWeights,
    SearchSession,
)

T = TypeVar("T")


def format_runs(runs: Sequence[HighlightRun], style: str = "bold reverse") -> str:
    """Render highlight runs as Rich markup, escaping the text itself."""
    return "".join(
        f"[{style}]{escape(run.text)}[/]" if run.matched else escape(run.text) for run in runs
    )


class FuzzySelectItem(ListItem):
    """A list item holding one search result."""

    def __init__(self, display_text: str, item: Any) -> None:
        super().__init__()
        self._display_text = display_text
        self.item = item

    def compose(self) -> ComposeResult:
        yield Static(self._display_text)


class FuzzySelectModal(ModalScreen[Optional[T]], Generic[T]):
    """fzf-style fuzzy select modal.

    Typing updates the query, up/down (or ctrl+p/ctrl+n) move the selection
    with wraparound, Enter commits and Escape cancels. All of it goes through
    a SearchSession; the widgets only mirror its render model.

    Returns ``result_fn(candidate_id)`` on commit, None on cancel.
    """

    DEFAULT_CSS = """
    FuzzySelectModal {
        align: center middle;
    }

    FuzzySelectModal > #fuzzy-container {
        width: 80;
        height: 70%;
        max-height: 30;
        background: $surface;
        border: thick $primary;
        padding: 1;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-title {
        height: 1;
        text-style: bold;
        margin-bottom: 1;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-input {
        height: 3;
        margin-bottom: 1;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-list {
        height: 1fr;
        border: solid $primary-background;
    }

    FuzzySelectModal > #fuzzy-container > #fuzzy-footer {
        height: 1;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("down", "cursor_down", "Down", show=False),
        Binding("ctrl+n", "cursor_down", "Down", show=False),
        Binding("up", "cursor_up", "Up", show=False),
        Binding("ctrl+p", "cursor_up", "Up", show=False),
    ]

    def __init__(
        self,
        candidates: Sequence[Candidate],
        display_fn: Optional[Callable[[RenderEntry], str]] = None,
        result_fn: Optional[Callable[[Any], T]] = None,
        placeholder: str = "Type to search...",
        title: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        debounce_delay: float = 0,
        empty_text: str = "No matches found",
        **kwargs,
    ) -> None:
        """Initialize the modal.

        Args:
            candidates: Ordered candidate snapshot to search.
            display_fn: Formats one render entry as Rich markup.
            result_fn: Maps the committed candidate id to the dismiss value.
            placeholder: Input placeholder text.
            title: Optional title shown above the input.
            limit: Maximum number of results shown.
            weights: Scoring constants for the matcher.
            debounce_delay: Seconds to wait after a keystroke before ranking.
            empty_text: Shown when the query matches nothing.
        """
        super().__init__(**kwargs)
        self._display_fn = display_fn or (lambda entry: format_runs(entry.highlight_runs))
        self._result_fn = result_fn or (lambda candidate_id: candidate_id)
        self._placeholder = placeholder
        self._title = title
        self._debounce_delay = debounce_delay
        self._debounce_timer: Optional[Timer] = None
        self._empty_text = empty_text
        self._populate_generation = 0
        self._pending_generation: Optional[int] = None
        self._session = SearchSession(limit=limit, weights=weights, on_commit=self._on_commit)
        self._session.open(candidates)

    @property
    def session(self) -> SearchSession:
        return self._session

    def compose(self) -> ComposeResult:
        with Vertical(id="fuzzy-container"):
            if self._title:
                yield Static(self._title, id="fuzzy-title")
            yield Input(placeholder=self._placeholder, id="fuzzy-input")
            yield ListView(id="fuzzy-list")
            yield Static(
                "↑/↓ navigate • Enter select • Esc cancel",
                id="fuzzy-footer",
            )

    def on_mount(self) -> None:
        list_view = self.query_one("#fuzzy-list", ListView)
        list_view.can_focus = False
        self.query_one("#fuzzy-input", Input).focus()
        self._populate_list()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-rank on every keystroke (optionally debounced)."""
        if event.input.id != "fuzzy-input":
            return
        query = event.value
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
            self._debounce_timer = None
        if self._debounce_delay > 0:
            self._debounce_timer = self.set_timer(
                self._debounce_delay, lambda: self._start_query(query)
            )
        else:
            self._start_query(query)

    def _start_query(self, query: str) -> None:
        self._debounce_timer = None
        generation = self._session.stage_query(query)
        self._pending_generation = generation
        # exclusive=True cancels the previous ranking; the generation check
        # in apply_results covers anything that already finished
        self.run_worker(self._rank(generation, query), group="fuzzy-rank", exclusive=True)

    async def _rank(self, generation: int, query: str) -> None:
        results = self._session.compute(query)
        if self._session.apply_results(generation, results):
            self._pending_generation = None
            self._populate_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._flush_pending_query()
        self._session.commit()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Mouse selection: move the cursor to the clicked row, then commit."""
        event.stop()
        index = event.list_view.index
        if index is None or not isinstance(event.item, FuzzySelectItem):
            return
        self._session.navigate(index - self._session.state.selected_index)
        self._session.commit()

    def action_cursor_down(self) -> None:
        self._session.navigate(1)
        self._sync_highlight()

    def action_cursor_up(self) -> None:
        self._session.navigate(-1)
        self._sync_highlight()

    def action_cancel(self) -> None:
        self._session.close()
        self.dismiss(None)

    def _on_commit(self, candidate_id: Any) -> None:
        self.dismiss(self._result_fn(candidate_id))

    def _flush_pending_query(self) -> None:
        """Rank the typed query now if a debounce or worker is still pending.

        Enter must act on what is in the input box, not on older results.
        """
        query = self.query_one("#fuzzy-input", Input).value
        pending = self._debounce_timer is not None or self._pending_generation is not None
        if not pending and self._session.state.query == query:
            return
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
            self._debounce_timer = None
        self._pending_generation = None
        self._session.set_query(query)
        self._populate_list()

    def _populate_list(self) -> None:
        self._populate_generation += 1
        generation = self._populate_generation

        list_view = self.query_one("#fuzzy-list", ListView)
        list_view.clear()

        entries = self._session.render()
        if not entries:
            list_view.append(ListItem(Static(f"[dim]{escape(self._empty_text)}[/dim]")))
            return

        for entry in entries:
            list_view.append(FuzzySelectItem(self._display_fn(entry), entry.id))

        def set_selection() -> None:
            if generation != self._populate_generation:
                return
            self._sync_highlight()

        self.call_after_refresh(set_selection)

    def _sync_highlight(self) -> None:
        state = self._session.state
        if not state.results:
            return
        list_view = self.query_one("#fuzzy-list", ListView)
        if len(list_view) > state.selected_index:
            list_view.index = state.selected_index
