"""Task search modal using FuzzySelectModal base."""

from typing import Optional

from rich.markup import escape

from ...config import DisplayConfig, SearchConfig
from ...models import BACKLOG_LABEL, Board
from ...search import RenderEntry, candidates_from_board
from ..layout import ColumnWidths
from .fuzzy_select import FuzzySelectModal, format_runs

# Default widths for search modal (slightly reduced for modal width)
_WIDTHS = ColumnWidths(title=40, location=14)

PRIORITY_COLORS = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}


class TaskSearchModal(FuzzySelectModal[int]):
    """Fuzzy search modal for finding tasks by title.

    Shows id, highlighted title, priority and sprint (or Backlog).
    Returns the task id on success, None on cancel.
    """

    def __init__(
        self,
        board: Board,
        search_config: Optional[SearchConfig] = None,
        display_config: Optional[DisplayConfig] = None,
        **kwargs,
    ) -> None:
        """Initialize the task search modal.

        Args:
            board: Board snapshot to search through.
            search_config: Result limit, debounce and scoring weights.
            display_config: Which metadata columns to show.
        """
        search_config = search_config or SearchConfig()
        self._display = display_config or DisplayConfig()
        super().__init__(
            candidates=candidates_from_board(board),
            display_fn=self._format_entry,
            placeholder="Search tasks...",
            title="Search Tasks",
            limit=search_config.limit,
            weights=search_config.scoring,
            debounce_delay=search_config.debounce_ms / 1000,
            empty_text="No tasks found",
            **kwargs,
        )

    def refresh_board(self, board: Board) -> None:
        """Re-run the current query against a reloaded board."""
        self.session.refresh(candidates_from_board(board))
        if self.is_mounted:
            self._populate_list()

    def _format_entry(self, entry: RenderEntry) -> str:
        """Format a result row: #id | title | priority | location."""
        w = _WIDTHS
        task_id = f"#{entry.id}".ljust(w.id)
        title_len = sum(len(run.text) for run in entry.highlight_runs)
        title = format_runs(entry.highlight_runs) + " " * max(0, w.title - title_len)
        parts = [f"[dim]{task_id}[/dim]", title]

        if self._display.show_priority and entry.priority_label:
            color = PRIORITY_COLORS.get(entry.priority_label, "white")
            parts.append(f"[{color}]{escape(entry.priority_label):<{w.priority}}[/{color}]")
        if self._display.show_location:
            color = "magenta" if entry.location_label == BACKLOG_LABEL else "cyan"
            parts.append(f"[{color}]{escape(entry.location_label)}[/{color}]")
        return "  ".join(parts)
