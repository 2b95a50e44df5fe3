"""Read-only detail view for a single task."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import BACKLOG_LABEL, Board, Task


def format_task_details(task: Task, board: Board) -> str:
    """Render a task's fields, its sprint and its body as Rich markup."""
    lines = [
        f"[b]Status:[/b]        {escape(task.status)}",
        f"[b]Priority:[/b]      {escape(task.priority)}",
        f"[b]Story points:[/b]  {task.story_points}",
    ]

    sprint = board.sprint_for(task)
    if sprint is None:
        lines.append(f"[b]Sprint:[/b]        [magenta]{BACKLOG_LABEL}[/magenta]")
    else:
        lines.append(f"[b]Sprint:[/b]        [cyan]{escape(sprint.name)}[/cyan]")
        if sprint.start_date or sprint.end_date:
            dates = f"{sprint.start_date or '?'} → {sprint.end_date or '?'}"
            lines.append(f"[b]Sprint dates:[/b]  {escape(dates)}")
        if sprint.goal:
            lines.append(f"[b]Sprint goal:[/b]   {escape(sprint.goal)}")

    if task.created_at:
        lines.append(f"[b]Created:[/b]       {escape(task.created_at)}")
    if task.updated_at:
        lines.append(f"[b]Updated:[/b]       {escape(task.updated_at)}")

    lines.append("")
    lines.append(escape(task.body) if task.body else "[dim]No description[/dim]")
    return "\n".join(lines)


class TaskDetailScreen(Screen):
    """Screen showing everything the board file says about one task."""

    CSS = """
    TaskDetailScreen {
        background: $surface;
    }

    #detail-container {
        width: 100%;
        height: 100%;
        padding: 1;
    }

    #detail-box {
        height: 1fr;
        padding: 1 2;
        border: solid $primary;
    }

    #detail-title {
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    #detail-hint {
        dock: bottom;
        height: 1;
        background: $primary-background;
        padding: 0 1;
        text-align: center;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "Close", show=False),
        Binding("q", "close", "Close", show=False),
    ]

    def __init__(self, task: Task, board: Board) -> None:
        super().__init__()
        self.board_task = task
        self.details = format_task_details(task, board)

    def compose(self) -> ComposeResult:
        task = self.board_task
        yield Header()
        yield Container(
            VerticalScroll(
                Static(f"{task.display_id}  {escape(task.title)}", id="detail-title"),
                Static(self.details, id="detail-body"),
                id="detail-box",
            ),
            Static("[dim]Press Esc to go back[/dim]", id="detail-hint"),
            id="detail-container",
        )
        yield Footer()

    def action_close(self) -> None:
        self.app.pop_screen()
