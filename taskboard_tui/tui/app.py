"""Main TUI application for the task board.

Built with Textual. Shows a read-only task list and opens the fuzzy task
search with ``/`` or ``ctrl+k``.
"""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, ListItem, ListView, Static

from .. import __version__
from ..config import Config
from ..models import BACKLOG_LABEL, Board, Task
from ..services import BoardLoadError, load_board
from .layout import ColumnWidths, calculate_column_widths, format_header_row
from .modals import TaskSearchModal
from .screens import HelpScreen, TaskDetailScreen

logger = logging.getLogger(__name__)


class TaskListItem(ListItem):
    """A list item displaying a task row."""

    def __init__(self, task: Task, location: str, column_widths: Optional[ColumnWidths] = None):
        super().__init__()
        self.board_task = task
        self._location = location
        self._column_widths = column_widths if column_widths is not None else ColumnWidths()
        if task.status == "done":
            self.add_class("-done")

    def compose(self) -> ComposeResult:
        yield Static(self._format_row(), id="row-content", markup=False)

    def _format_row(self) -> str:
        task = self.board_task
        w = self._column_widths
        sp = " " * w.col_spacing
        return (
            f"{task.display_id:<{w.id}}{sp}"
            f"{task.title[: w.title]:<{w.title}}{sp}"
            f"{task.priority[: w.priority]:<{w.priority}}{sp}"
            f"{self._location[: w.location]:<{w.location}}{sp}"
            f"{task.status[: w.status]:<{w.status}}"
        )


class TaskBoardApp(App):
    """Task board TUI application."""

    TITLE = "Task Board"
    CSS = """
    Screen {
        background: $surface;
    }

    #app-header {
        dock: top;
        height: 1;
        background: $primary;
        padding: 0 1;
        text-align: center;
        text-style: bold;
    }

    #tasks-list {
        height: 1fr;
        border: solid $primary;
    }

    .task-header {
        height: auto;
        padding: 0 1;
        background: $primary-background;
        text-style: bold;
    }

    TaskListItem {
        height: auto;
        padding: 0 1;
    }

    TaskListItem.-done {
        color: $text-muted;
    }

    #status-bar {
        dock: bottom;
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("g", "scroll_top", "Top", show=False),
        Binding("G", "scroll_bottom", "Bottom", show=False),
        Binding("/", "fuzzy_search", "Search"),
        Binding("ctrl+k", "fuzzy_search", "Search", show=False),
        Binding("f5", "refresh", "Reload"),
        Binding("?", "show_help", "Help"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        board: Board,
        config: Optional[Config] = None,
        board_path: Optional[Path] = None,
    ):
        """Initialize the app.

        Args:
            board: Board snapshot to display.
            config: Application configuration.
            board_path: Directory to reload the board from on refresh.
        """
        super().__init__()
        self._board = board
        self._config = config or Config()
        self._board_path = board_path
        self._column_widths = ColumnWidths()

    @property
    def board(self) -> Board:
        return self._board

    def compose(self) -> ComposeResult:
        yield Static(f"Task Board v{__version__}", id="app-header")
        with Container(id="main-container"):
            yield Static(format_header_row(self._column_widths), classes="task-header")
            yield ListView(id="tasks-list")
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self._column_widths = calculate_column_widths(self.size.width)
        self.query_one(".task-header", Static).update(format_header_row(self._column_widths))
        self._render_tasks()

    def _render_tasks(self) -> None:
        list_view = self.query_one("#tasks-list", ListView)
        list_view.clear()
        for task in self._board.tasks:
            list_view.append(
                TaskListItem(task, self._board.location_label(task), self._column_widths)
            )
        self._update_status()

    def _update_status(self) -> None:
        backlog = sum(1 for task in self._board.tasks if task.in_backlog)
        status = (
            f"{len(self._board.tasks)} tasks • {len(self._board.sprints)} sprints • "
            f"{backlog} in {BACKLOG_LABEL.lower()}"
        )
        self.query_one("#status-bar", Static).update(status)

    def action_cursor_down(self) -> None:
        self.query_one("#tasks-list", ListView).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one("#tasks-list", ListView).action_cursor_up()

    def action_scroll_top(self) -> None:
        list_view = self.query_one("#tasks-list", ListView)
        if len(list_view) > 0:
            list_view.index = 0

    def action_scroll_bottom(self) -> None:
        list_view = self.query_one("#tasks-list", ListView)
        if len(list_view) > 0:
            list_view.index = len(list_view) - 1

    def action_fuzzy_search(self) -> None:
        """Open fuzzy search modal for tasks."""
        if not self._board.tasks:
            self.notify("No tasks to search", severity="warning")
            return
        modal = TaskSearchModal(
            board=self._board,
            search_config=self._config.search,
            display_config=self._config.display,
        )
        self.push_screen(modal, self._on_search_selected)

    def _on_search_selected(self, task_id: Optional[int]) -> None:
        """Move the cursor to the picked task and open its details."""
        if task_id is None:
            return
        list_view = self.query_one("#tasks-list", ListView)
        for i, item in enumerate(list_view.children):
            if isinstance(item, TaskListItem) and item.board_task.id == task_id:
                list_view.index = i
                break
        task = self._board.get_task(task_id)
        if task is None:
            logger.warning("Selected task %s is no longer on the board", task_id)
            return
        self.push_screen(TaskDetailScreen(task, self._board))

    def action_refresh(self) -> None:
        """Reload the board from disk."""
        if self._board_path is None:
            self.notify("Board was not loaded from disk", severity="warning")
            return
        try:
            self._board = load_board(self._board_path)
        except BoardLoadError as e:
            logger.warning("Reload failed: %s", e)
            self.notify(str(e), severity="error")
            return
        for screen in self.screen_stack:
            if isinstance(screen, TaskSearchModal):
                screen.refresh_board(self._board)
        self._render_tasks()
        self.notify(f"Reloaded {len(self._board.tasks)} tasks", timeout=2)

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())
