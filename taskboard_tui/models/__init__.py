"""Data models for the task board."""

from .task import BACKLOG_LABEL, Board, Sprint, Task

__all__ = ["BACKLOG_LABEL", "Board", "Sprint", "Task"]
