"""Fuzzy matching: ordered-subsequence test plus scoring."""

from .types import DEFAULT_WEIGHTS, NO_MATCH, MatchResult, ScoringWeights

__all__ = ["fold_case", "match"]

# ASCII-only folding keeps every index in the folded text aligned with the
# original text.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def fold_case(value: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return value.translate(_ASCII_LOWER)


def _find_positions(text: str, query: str) -> tuple[int, ...] | None:
    """Greedily consume query chars left to right (fzf-style).

    Returns:
        Index of each consumed char in ``text``, or None if the query is not
        an ordered subsequence of the text.
    """
    positions: list[int] = []
    query_idx = 0
    for i, char in enumerate(text):
        if query_idx < len(query) and char == query[query_idx]:
            positions.append(i)
            query_idx += 1
    if query_idx != len(query):
        return None
    return tuple(positions)


def match(text: str, query: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> MatchResult:
    """Score ``query`` against ``text``.

    Every query character must appear in the text in the same order,
    case-insensitively, though not necessarily contiguously. Duplicate query
    characters are each consumed at their first available occurrence; no
    globally optimal alignment is attempted.

    Args:
        text: Text to search in.
        query: Characters to search for.
        weights: Scoring constants.

    Returns:
        MatchResult with the score and matched positions, or NO_MATCH.
    """
    if not isinstance(text, str) or not isinstance(query, str):
        return NO_MATCH
    if not query:
        return MatchResult(matched=True, score=0)

    text_folded = fold_case(text)
    query_folded = fold_case(query)

    positions = _find_positions(text_folded, query_folded)
    if positions is None:
        return NO_MATCH

    score = weights.base
    if text_folded == query_folded:
        score += weights.exact
    if text_folded.startswith(query_folded):
        score += weights.prefix

    for prev, cur in zip(positions, positions[1:]):
        if cur == prev + 1:
            score += weights.consecutive

    first, last = positions[0], positions[-1]
    score -= first * weights.first_position
    gaps = last - first - (len(positions) - 1)
    score -= gaps * weights.gap

    return MatchResult(matched=True, score=score, positions=positions)
