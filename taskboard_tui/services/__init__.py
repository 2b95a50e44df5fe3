"""Services for the task board."""

from .board_loader import BoardLoadError, load_board

__all__ = [
    "BoardLoadError",
    "load_board",
]
