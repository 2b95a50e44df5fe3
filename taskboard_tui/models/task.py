"""Task and sprint records."""

from dataclasses import dataclass
from typing import Optional

BACKLOG_LABEL = "Backlog"


@dataclass(frozen=True)
class Sprint:
    """A sprint read from ``sprints/*.md``."""

    id: int
    name: str
    goal: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: str = "planned"
    filename: str = ""


@dataclass(frozen=True)
class Task:
    """A task read from ``tasks/*.md``.

    ``sprint_id`` is None for tasks sitting in the backlog.
    """

    id: int
    title: str
    status: str = "todo"
    sprint_id: Optional[int] = None
    priority: str = "medium"
    story_points: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    body: str = ""
    filename: str = ""

    @property
    def in_backlog(self) -> bool:
        return self.sprint_id is None

    @property
    def display_id(self) -> str:
        return f"#{self.id}"


@dataclass(frozen=True)
class Board:
    """Read-only snapshot of a board directory."""

    tasks: tuple[Task, ...] = ()
    sprints: tuple[Sprint, ...] = ()

    def sprint_for(self, task: Task) -> Optional[Sprint]:
        """Sprint the task belongs to, or None for backlog/unknown sprints."""
        if task.sprint_id is None:
            return None
        for sprint in self.sprints:
            if sprint.id == task.sprint_id:
                return sprint
        return None

    def location_label(self, task: Task) -> str:
        sprint = self.sprint_for(task)
        return sprint.name if sprint is not None else BACKLOG_LABEL

    def get_task(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
