"""Command-line entry point for the task board."""

import logging
import sys
from typing import Optional

import click

from . import __version__
from .cli.formatters import echo_error, echo_header, format_result_row, format_task_row
from .cli.helpers import get_board, get_board_path, require_tasks
from .config import load_config
from .search import SearchSession, candidates_from_board, rank


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to taskboard.toml (default: $TASKBOARD_CONFIG or ./taskboard.toml).",
)
@click.option(
    "--board",
    "board_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Board directory holding tasks/ and sprints/.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="taskboard")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], board_path: Optional[str], verbose: bool):
    """Task Board - browse tasks and sprints, find tasks with fuzzy search."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["board_path"] = board_path


@main.command()
@click.argument("query")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Max results.")
@click.option("--score", "show_score", is_flag=True, help="Show match scores.")
@click.option(
    "--select",
    type=click.IntRange(min=1),
    default=None,
    help="Print only the Nth result (1-based, wraps around).",
)
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    limit: Optional[int],
    show_score: bool,
    select: Optional[int],
):
    """Fuzzy-search task titles.

    Letters of QUERY must appear in the title in order, not necessarily
    next to each other. Exits with status 1 when nothing matches.
    """
    cfg = ctx.obj["config"]
    board = get_board(ctx)
    if not require_tasks(board):
        sys.exit(1)

    limit = limit or cfg.search.limit
    candidates = candidates_from_board(board)

    if select is not None:
        _search_select(board, candidates, query, limit, select)
        return

    results = rank(candidates, query, limit=limit, weights=cfg.search.scoring)
    if not results:
        echo_error(f"No tasks match '{query}'")
        sys.exit(1)

    for entry in results:
        click.echo(
            format_result_row(
                entry,
                show_priority=cfg.display.show_priority,
                show_location=cfg.display.show_location,
                show_score=show_score,
            )
        )


def _search_select(board, candidates, query: str, limit: int, select: int) -> None:
    """Drive a search session the way the TUI does: query, navigate, commit."""
    cfg = click.get_current_context().obj["config"]
    committed = []
    session = SearchSession(limit=limit, weights=cfg.search.scoring, on_commit=committed.append)
    session.open(candidates)
    session.set_query(query)
    for _ in range(select - 1):
        session.navigate(1)
    session.commit()

    if not committed:
        echo_error(f"No tasks match '{query}'")
        sys.exit(1)

    task = board.get_task(committed[0])
    click.echo(format_task_row(task, board))
    if task.body:
        click.echo("")
        click.echo(task.body)


@main.command("tasks")
@click.pass_context
def list_tasks(ctx: click.Context):
    """List every task on the board in id order."""
    board = get_board(ctx)
    if not require_tasks(board):
        return
    echo_header(f"Tasks ({len(board.tasks)})")
    for task in board.tasks:
        click.echo(format_task_row(task, board))


@main.command()
@click.pass_context
def tui(ctx: click.Context):
    """Launch the interactive board."""
    from .tui.app import TaskBoardApp

    board = get_board(ctx)
    app = TaskBoardApp(board=board, config=ctx.obj["config"], board_path=get_board_path(ctx))
    app.run()


if __name__ == "__main__":
    main()
