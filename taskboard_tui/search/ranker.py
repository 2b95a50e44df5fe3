"""Rank a candidate snapshot against a query."""

import logging
from typing import Sequence

from .highlight import highlight
from .matcher import match
from .types import DEFAULT_WEIGHTS, Candidate, RankedEntry, ScoringWeights

__all__ = ["DEFAULT_LIMIT", "rank"]

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


def rank(
    candidates: Sequence[Candidate],
    query: str,
    limit: int = DEFAULT_LIMIT,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[RankedEntry]:
    """Match every candidate, drop non-matches, sort and truncate.

    The whole snapshot is rescanned on every call, which is fine for the
    few hundred tasks a single board holds.

    Args:
        candidates: Ordered candidate snapshot.
        query: Search query. Empty or whitespace-only means browse mode; a
            non-string query matches nothing.
        limit: Maximum number of entries returned.
        weights: Scoring constants passed to the matcher.

    Returns:
        Entries ordered by score descending, ties in input order.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError(f"Invalid limit: {limit}")

    if query is not None and not isinstance(query, str):
        logger.debug("Non-string query %r matches nothing", query)
        return []

    if not query or not query.strip():
        # Browse mode: pass-through of the first entries, unscored
        return [
            RankedEntry(
                candidate=cand,
                score=0,
                highlight_runs=highlight(cand.searchable_text, ()),
            )
            for cand in candidates[:limit]
        ]

    scored: list[tuple[int, Candidate, tuple[int, ...]]] = []
    for cand in candidates:
        result = match(cand.searchable_text, query, weights)
        if not result.matched or result.score is None:
            continue
        scored.append((result.score, cand, result.positions))

    # sort() is stable, so equal scores keep snapshot order
    scored.sort(key=lambda item: -item[0])
    logger.debug("Query %r matched %d of %d candidates", query, len(scored), len(candidates))

    return [
        RankedEntry(
            candidate=cand,
            score=score,
            highlight_runs=highlight(cand.searchable_text, positions),
        )
        for score, cand, positions in scored[:limit]
    ]
