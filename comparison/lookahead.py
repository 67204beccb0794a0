"""Bounded forward search for a displaced line."""
from __future__ import annotations

from typing import NamedTuple, Sequence

from utils.text_lines import trim


class LookaheadMatch(NamedTuple):
    found: bool
    offset: int  # -1 when not found


NO_MATCH = LookaheadMatch(False, -1)


def find_matching_line(target: str, lines: Sequence[str], max_lookahead: int = 5) -> LookaheadMatch:
    """
    Search the first ``max_lookahead`` lines for one equal to ``target`` after trimming.

    Args:
        target: Trimmed line to look for
        lines: Remainder of a document, starting at the current cursor
        max_lookahead: Window size; only ``min(max_lookahead, len(lines))`` lines are inspected

    Returns:
        LookaheadMatch with the zero-based offset of the first hit
    """
    search_range = min(max_lookahead, len(lines))
    for offset in range(search_range):
        if trim(lines[offset]) == target:
            return LookaheadMatch(True, offset)
    return NO_MATCH
