"""Shared CLI helpers for context management and board loading."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from .formatters import echo_warning

if TYPE_CHECKING:
    from click import Context

    from ..config import Config
    from ..models import Board


def get_board_path(ctx: Context) -> Path:
    """Board directory: --board flag wins over the config file."""
    board_path = ctx.obj.get("board_path")
    if board_path is not None:
        return Path(board_path)
    cfg: Config = ctx.obj["config"]
    return cfg.board.path


def get_board(ctx: Context) -> Board:
    """Lazily load the board snapshot.

    Args:
        ctx: Click context with config and board path.

    Returns:
        Board instance.

    Raises:
        click.ClickException: If the board directory cannot be read.
    """
    from ..services import BoardLoadError, load_board

    if "board" not in ctx.obj:
        try:
            ctx.obj["board"] = load_board(get_board_path(ctx))
        except BoardLoadError as e:
            raise click.ClickException(str(e)) from e
    return ctx.obj["board"]


def require_tasks(board: Board) -> bool:
    """Check if the board has tasks, show message if empty.

    Returns:
        True if tasks exist, False otherwise (also prints message).
    """
    if not board.tasks:
        echo_warning("No tasks on this board.")
        click.echo("Add markdown files under tasks/ first.")
        return False
    return True
