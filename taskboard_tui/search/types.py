"""Value types shared by the search engine.

All types are frozen dataclasses so a result set can be handed to the UI
without the UI being able to mutate engine state.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Optional

__all__ = [
    "Candidate",
    "HighlightRun",
    "MatchResult",
    "NO_MATCH",
    "RankedEntry",
    "RenderEntry",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
]


@dataclass(frozen=True)
class Candidate:
    """A searchable item supplied by the host.

    The engine only ever reads ``searchable_text``; the labels travel through
    unchanged to the render model.
    """

    id: Hashable
    searchable_text: str
    location_label: str = ""
    priority_label: Optional[str] = None


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a query against one text.

    ``score`` is None for non-matches so they cannot be sorted by accident.
    """

    matched: bool
    score: Optional[int] = None
    positions: tuple[int, ...] = ()


NO_MATCH = MatchResult(matched=False)


@dataclass(frozen=True)
class HighlightRun:
    """A contiguous span of text, either matched or plain."""

    text: str
    matched: bool = False


@dataclass(frozen=True)
class RankedEntry:
    """A candidate that survived ranking."""

    candidate: Candidate
    score: int
    highlight_runs: tuple[HighlightRun, ...]


@dataclass(frozen=True)
class RenderEntry:
    """One row of the outbound render model."""

    id: Any
    highlight_runs: tuple[HighlightRun, ...]
    location_label: str
    priority_label: Optional[str]
    is_selected: bool


@dataclass(frozen=True)
class ScoringWeights:
    """Tunable scoring constants.

    Defaults reproduce the long-standing ranking so existing users see the
    same ordering.
    """

    base: int = 100
    exact: int = 1000
    prefix: int = 500
    consecutive: int = 50
    first_position: int = 2
    gap: int = 5

    def __post_init__(self) -> None:
        for name in ("base", "exact", "prefix", "consecutive", "first_position", "gap"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Invalid scoring weight {name}: {value!r} (expected integer)")


DEFAULT_WEIGHTS = ScoringWeights()
