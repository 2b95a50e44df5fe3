"""Search session state machine.

The session is the only stateful piece of the search engine. It owns the
query, the ranked results and the selection cursor, and exposes four calls a
presentation layer maps its input events onto: ``set_query``, ``navigate``,
``commit`` and ``close``. Nothing here knows about Textual, so every
transition can be tested directly.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence

from .ranker import DEFAULT_LIMIT, rank
from .types import DEFAULT_WEIGHTS, Candidate, RankedEntry, RenderEntry, ScoringWeights

__all__ = ["SearchSession", "SessionState", "SessionStatus"]

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Lifecycle of a search session."""

    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of a session."""

    status: SessionStatus = SessionStatus.CLOSED
    query: str = ""
    results: tuple[RankedEntry, ...] = ()
    selected_index: int = 0

    @property
    def is_open(self) -> bool:
        return self.status is SessionStatus.OPEN

    @property
    def selected(self) -> Optional[RankedEntry]:
        """The entry under the cursor, or None when there are no results."""
        if not self.results:
            return None
        return self.results[self.selected_index]


class SearchSession:
    """Stateful controller for one search interaction.

    Args:
        limit: Maximum number of results kept per query.
        weights: Scoring constants passed down to the matcher.
        on_commit: Called with the committed candidate id, once per
            successful ``commit()``.
    """

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        on_commit: Optional[Callable[[Any], None]] = None,
    ) -> None:
        if limit < 0:
            raise ValueError(f"Invalid limit: {limit}")
        self._limit = limit
        self._weights = weights
        self._on_commit = on_commit
        self._candidates: tuple[Candidate, ...] = ()
        self._state = SessionState()
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    def compute(self, query: str) -> list[RankedEntry]:
        """Rank the current snapshot against ``query`` without touching state."""
        return rank(self._candidates, query, self._limit, self._weights)

    def open(self, candidates: Iterable[Candidate]) -> SessionState:
        """Open (or reopen) the session in browse mode over ``candidates``."""
        self._candidates = tuple(candidates)
        self._generation += 1
        self._state = SessionState(
            status=SessionStatus.OPEN,
            query="",
            results=tuple(self.compute("")),
            selected_index=0,
        )
        logger.debug("Search opened over %d candidates", len(self._candidates))
        return self._state

    def set_query(self, query: str) -> SessionState:
        """Re-rank for ``query``; the cursor snaps back to the top."""
        generation = self.stage_query(query)
        if self._state.is_open:
            self.apply_results(generation, self.compute(query))
        return self._state

    def stage_query(self, query: str) -> int:
        """Record ``query`` and invalidate any results still being computed.

        Hosts that rank off the UI thread call this first, compute with
        ``compute()``, then hand the results to ``apply_results`` along with
        the returned generation.
        """
        if not self._state.is_open:
            logger.debug("Ignoring query %r on closed session", query)
            return self._generation
        self._generation += 1
        self._state = replace(self._state, query=query)
        return self._generation

    def apply_results(self, generation: int, results: Sequence[RankedEntry]) -> bool:
        """Install results computed for ``generation``.

        Returns:
            False if a newer query, a refresh or a close superseded them.
        """
        if generation != self._generation or not self._state.is_open:
            logger.debug(
                "Dropping stale results (generation %d, current %d)",
                generation,
                self._generation,
            )
            return False
        self._state = replace(self._state, results=tuple(results), selected_index=0)
        return True

    def refresh(self, candidates: Iterable[Candidate]) -> SessionState:
        """Swap in a new snapshot and re-run the current query."""
        if not self._state.is_open:
            logger.debug("Ignoring refresh on closed session")
            return self._state
        self._candidates = tuple(candidates)
        return self.set_query(self._state.query)

    def navigate(self, direction: int) -> SessionState:
        """Move the cursor by ``direction``, wrapping around at either end."""
        state = self._state
        if not state.is_open or not state.results:
            return state
        n = len(state.results)
        self._state = replace(state, selected_index=(state.selected_index + direction + n) % n)
        return self._state

    def commit(self) -> Optional[Candidate]:
        """Close the session and emit the selected candidate.

        Returns:
            The committed candidate, or None when there was nothing to commit
            (the session then stays open).
        """
        selected = self._state.selected if self._state.is_open else None
        if selected is None:
            return None

        candidate = selected.candidate
        self._reset()
        logger.debug("Committed candidate %r", candidate.id)
        if self._on_commit is not None:
            self._on_commit(candidate.id)
        return candidate

    def close(self) -> SessionState:
        """Close without emitting anything."""
        if self._state.is_open:
            self._reset()
        return self._state

    def render(self) -> tuple[RenderEntry, ...]:
        """Build the render model for the current results."""
        state = self._state
        return tuple(
            RenderEntry(
                id=entry.candidate.id,
                highlight_runs=entry.highlight_runs,
                location_label=entry.candidate.location_label,
                priority_label=entry.candidate.priority_label,
                is_selected=i == state.selected_index,
            )
            for i, entry in enumerate(state.results)
        )

    def _reset(self) -> None:
        self._generation += 1
        self._state = SessionState()
