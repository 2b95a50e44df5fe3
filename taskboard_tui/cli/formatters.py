"""CLI output formatters.

Keeps display logic out of main.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import click

if TYPE_CHECKING:
    from ..models import Board, Task
    from ..search import HighlightRun, RankedEntry


def format_runs(runs: Sequence[HighlightRun], color: bool = True) -> str:
    """Join highlight runs, styling matched runs bold/underlined."""
    if not color:
        return "".join(run.text for run in runs)
    return "".join(
        click.style(run.text, bold=True, underline=True, fg="yellow") if run.matched else run.text
        for run in runs
    )


def format_result_row(
    entry: RankedEntry,
    show_priority: bool = True,
    show_location: bool = True,
    show_score: bool = False,
    color: bool = True,
) -> str:
    """Format a ranked search result for CLI display.

    Args:
        entry: Ranked entry from the search engine.
        show_priority: Whether to append the priority label.
        show_location: Whether to append the sprint/backlog label.
        show_score: Whether to prefix the match score.
        color: Whether to style matched characters.

    Returns:
        Formatted string for display.
    """
    cand = entry.candidate
    row = f"{f'#{cand.id}':<6}  {format_runs(entry.highlight_runs, color)}"
    meta = []
    if show_priority and cand.priority_label:
        meta.append(cand.priority_label)
    if show_location:
        meta.append(cand.location_label)
    if meta:
        row += f"  [{' | '.join(meta)}]"
    if show_score:
        row = f"{entry.score:>6}  {row}"
    return row


def format_task_row(task: Task, board: Board) -> str:
    """Format a task row for the plain task listing."""
    title = task.title[:40].ljust(40)
    return (
        f"{task.display_id:<6}  {title}  {task.priority:<8}  "
        f"{board.location_label(task):<18}  {task.status}"
    )


def echo_error(message: str) -> None:
    """Echo an error message in red."""
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Echo a warning message in yellow."""
    click.echo(click.style(f"⚠ {message}", fg="yellow"))


def echo_header(message: str) -> None:
    """Echo a header with underline."""
    click.echo(f"\n{message}")
    click.echo("=" * len(message))
