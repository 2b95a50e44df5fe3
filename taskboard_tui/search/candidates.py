"""Build the candidate snapshot the search engine consumes."""

from ..models import Board
from .types import Candidate


def candidates_from_board(board: Board) -> tuple[Candidate, ...]:
    """One candidate per task, in board order, searchable by title."""
    return tuple(
        Candidate(
            id=task.id,
            searchable_text=task.title,
            location_label=board.location_label(task),
            priority_label=task.priority or None,
        )
        for task in board.tasks
    )
