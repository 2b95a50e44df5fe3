"""Fuzzy task search: matching, highlighting, ranking and the search session."""

from .candidates import candidates_from_board
from .highlight import highlight
from .matcher import match
from .ranker import DEFAULT_LIMIT, rank
from .session import SearchSession, SessionState, SessionStatus
from .types import (
    DEFAULT_WEIGHTS,
    NO_MATCH,
    Candidate,
    HighlightRun,
    MatchResult,
    RankedEntry,
    RenderEntry,
    ScoringWeights,
)

__all__ = [
    "Candidate",
    "DEFAULT_LIMIT",
    "DEFAULT_WEIGHTS",
    "HighlightRun",
    "MatchResult",
    "NO_MATCH",
    "RankedEntry",
    "RenderEntry",
    "ScoringWeights",
    "SearchSession",
    "SessionState",
    "SessionStatus",
    "candidates_from_board",
    "highlight",
    "match",
    "rank",
]
