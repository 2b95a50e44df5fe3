"""Read-only loader for a board directory.

A board is a directory holding ``tasks/*.md`` and ``sprints/*.md``, each file
carrying its fields as YAML frontmatter. This module only reads; editing
tasks is done elsewhere.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import frontmatter
import yaml

from ..models import Board, Sprint, Task

__all__ = ["BoardLoadError", "load_board", "parse_sprint", "parse_task"]

logger = logging.getLogger(__name__)

TASKS_DIR = "tasks"
SPRINTS_DIR = "sprints"


class BoardLoadError(Exception):
    """Raised when a board directory cannot be read."""


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return None


def _as_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def parse_task(metadata: dict[str, Any], body: str = "", filename: str = "") -> Optional[Task]:
    """Build a Task from frontmatter, or None if it has no usable id."""
    task_id = _as_int(metadata.get("id"))
    if task_id is None:
        return None
    return Task(
        id=task_id,
        title=str(metadata.get("title") or ""),
        status=str(metadata.get("status") or "todo"),
        sprint_id=_as_int(metadata.get("sprint")),
        priority=str(metadata.get("priority") or "medium"),
        story_points=_as_int(metadata.get("storyPoints")) or 0,
        created_at=_as_str(metadata.get("createdAt")),
        updated_at=_as_str(metadata.get("updatedAt")),
        body=body,
        filename=filename,
    )


def parse_sprint(metadata: dict[str, Any], filename: str = "") -> Optional[Sprint]:
    """Build a Sprint from frontmatter, or None if it has no usable id."""
    sprint_id = _as_int(metadata.get("id"))
    if sprint_id is None:
        return None
    return Sprint(
        id=sprint_id,
        name=str(metadata.get("name") or f"Sprint {sprint_id}"),
        goal=str(metadata.get("goal") or ""),
        start_date=_as_str(metadata.get("startDate")),
        end_date=_as_str(metadata.get("endDate")),
        status=str(metadata.get("status") or "planned"),
        filename=filename,
    )


def _read_posts(directory: Path) -> list[tuple[Path, frontmatter.Post]]:
    if not directory.is_dir():
        logger.debug("No %s directory, treating as empty", directory)
        return []

    posts = []
    for path in sorted(directory.glob("*.md")):
        try:
            posts.append((path, frontmatter.load(path)))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Skipping unreadable file %s: %s", path, e)
    return posts


def load_board(root: Union[str, Path]) -> Board:
    """Load all tasks and sprints under ``root``.

    Tasks and sprints are sorted by id. Files without an integer id are
    skipped with a warning.

    Raises:
        BoardLoadError: If ``root`` is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise BoardLoadError(f"Board directory not found: {root}")

    tasks: list[Task] = []
    for path, post in _read_posts(root / TASKS_DIR):
        task = parse_task(post.metadata, post.content.strip(), path.name)
        if task is None:
            logger.warning("Skipping task file without id: %s", path)
            continue
        tasks.append(task)

    sprints: list[Sprint] = []
    for path, post in _read_posts(root / SPRINTS_DIR):
        sprint = parse_sprint(post.metadata, path.name)
        if sprint is None:
            logger.warning("Skipping sprint file without id: %s", path)
            continue
        sprints.append(sprint)

    tasks.sort(key=lambda t: t.id)
    sprints.sort(key=lambda s: s.id)
    logger.debug("Loaded %d tasks and %d sprints from %s", len(tasks), len(sprints), root)
    return Board(tasks=tuple(tasks), sprints=tuple(sprints))
