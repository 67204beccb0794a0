"""Reconcile one-sided rows whose content exists on the other side."""
from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from comparison.models import DiffLine, DiffLineType
from utils.logging import logger
from utils.text_lines import trim


def filter_false_positives(diff_lines: Sequence[DiffLine]) -> List[DiffLine]:
    """
    Drop only_in_original / only_in_ghost pairs that carry the same trimmed content.

    The lookahead window in the alignment step cannot see every reordering,
    so a moved line can surface as a deletion at one position and an
    insertion at another. This pass pairs them up without any distance
    bound: for each only_in_original row, the first unconsumed
    only_in_ghost row with equal non-empty content (in emission order) is
    consumed together with it. First match wins, even when a closer
    duplicate exists further on.

    Args:
        diff_lines: Aligned rows as produced by align_lines

    Returns:
        The rows minus every reconciled pair, relative order preserved.
    """
    only_original: List[Tuple[int, str]] = []
    only_ghost: List[Tuple[int, str]] = []
    for index, line in enumerate(diff_lines):
        if line.type == DiffLineType.ONLY_IN_ORIGINAL:
            only_original.append((index, trim(line.original_content)))
        elif line.type == DiffLineType.ONLY_IN_GHOST:
            only_ghost.append((index, trim(line.ghost_content)))

    skip: Set[int] = set()
    for orig_index, orig_content in only_original:
        if not orig_content:
            continue
        for ghost_index, ghost_content in only_ghost:
            if ghost_index in skip:
                continue
            if orig_content == ghost_content:
                skip.add(orig_index)
                skip.add(ghost_index)
                break

    if skip:
        logger.debug("Reconciled %d moved line pairs", len(skip) // 2)

    return [line for index, line in enumerate(diff_lines) if index not in skip]
