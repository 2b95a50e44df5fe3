"""Split text into plain/matched runs for display."""

from typing import Sequence

from .types import HighlightRun

__all__ = ["group_positions", "highlight"]


def group_positions(positions: Sequence[int]) -> list[tuple[int, int]]:
    """Group strictly increasing positions into maximal consecutive runs.

    Returns:
        List of ``(start, end)`` pairs, ``end`` exclusive.
    """
    groups: list[tuple[int, int]] = []
    if not positions:
        return groups

    start = end = positions[0]
    for pos in positions[1:]:
        if pos == end + 1:
            end = pos
        else:
            groups.append((start, end + 1))
            start = end = pos
    groups.append((start, end + 1))
    return groups


def highlight(text: str, positions: Sequence[int]) -> tuple[HighlightRun, ...]:
    """Convert matched positions into ordered highlight runs.

    Joining the ``text`` of every run reproduces ``text`` exactly. No markup
    is applied; escaping for a presentation layer is up to the caller.

    Args:
        text: The original text.
        positions: Strictly increasing, in-bounds indices into ``text``.

    Returns:
        Tuple of HighlightRun. Without positions this is a single plain run
        spanning ``text``, even when ``text`` is empty; otherwise no run is
        empty.
    """
    if not positions:
        return (HighlightRun(text),)

    runs: list[HighlightRun] = []
    last = 0
    for start, end in group_positions(positions):
        if start > last:
            runs.append(HighlightRun(text[last:start]))
        runs.append(HighlightRun(text[start:end], matched=True))
        last = end
    if last < len(text):
        runs.append(HighlightRun(text[last:]))
    return tuple(runs)
