"""TUI modals for the task board."""

from .fuzzy_select import FuzzySelectItem, FuzzySelectModal, format_runs
from .task_search import TaskSearchModal

__all__ = [
    "FuzzySelectItem",
    "FuzzySelectModal",
    "TaskSearchModal",
    "format_runs",
]
