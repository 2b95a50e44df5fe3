"""Help screen for displaying keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

HELP_TEXT = """\
[b]Board Navigation:[/b]
  j/Down    Move down
  k/Up      Move up
  g         Go to top
  G         Go to bottom

[b]Search:[/b]
  /         Search tasks by title
  Ctrl+k    Search tasks by title

[b]In the search box:[/b]
  Type      Filter tasks (letters need not be adjacent)
  Down/Up   Move selection (wraps around)
  Ctrl+n/p  Move selection (wraps around)
  Enter     Open the selected task
  Esc       Close search

[b]Other Actions:[/b]
  F5        Reload board from disk
  ?         This help
  q         Quit

[b]Sprint Column:[/b]
  Backlog   Task is not assigned to a sprint
"""


class HelpScreen(Screen):
    """Screen for displaying keyboard shortcuts and help information."""

    CSS = """
    HelpScreen {
        background: $surface;
    }

    #help-container {
        width: 100%;
        height: 100%;
        padding: 1;
    }

    #help-box {
        height: 1fr;
        padding: 1 2;
        border: solid $primary;
    }

    #help-title {
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    #help-hint {
        dock: bottom;
        height: 1;
        background: $primary-background;
        padding: 0 1;
        text-align: center;
    }
    """

    BINDINGS = [
        Binding("question_mark", "close", "Close", show=False),
        Binding("escape", "close", "Close"),
        Binding("q", "close", "Close", show=False),
    ]

    def compose(self) -> ComposeResult:
        """Compose the screen."""
        yield Header()
        yield Container(
            VerticalScroll(
                Static("[b]Keyboard Shortcuts[/b]\n", id="help-title"),
                Static(HELP_TEXT),
                id="help-box",
            ),
            Static("[dim]Press ? or Esc to close[/dim]", id="help-hint"),
            id="help-container",
        )
        yield Footer()

    def action_close(self) -> None:
        """Close the help screen."""
        self.app.pop_screen()
