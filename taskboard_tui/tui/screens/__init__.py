"""TUI screens for the task board."""

from .help import HelpScreen
from .task_detail import TaskDetailScreen, format_task_details

__all__ = ["HelpScreen", "TaskDetailScreen", "format_task_details"]
