"""
Ghost overlay comparison of JSON/YAML-shaped text.

Entry point for comparing an original document against a ghost (candidate)
version:
1. Split both texts with one newline rule
2. Align them line by line (key-aware, bounded lookahead)
3. Reconcile moved lines the lookahead missed
4. Fold long runs of matching rows
5. Return an immutable DiffResult
"""
from __future__ import annotations

from typing import Optional

from comparison.collapser import create_collapsed_sections
from comparison.false_positive_filter import filter_false_positives
from comparison.line_alignment import align_lines
from comparison.models import DiffResult
from utils.logging import logger
from utils.performance import track_time
from utils.text_lines import split_lines


def compare(
    original: str,
    ghost: str,
    *,
    lookahead_window: Optional[int] = None,
    min_run: Optional[int] = None,
) -> DiffResult:
    """
    Compare two texts and classify every line.

    Never raises for string input: empty, identical and fully disjoint texts
    all produce a result.

    Args:
        original: Baseline text
        ghost: Candidate text
        lookahead_window: Override for the alignment lookahead window
        min_run: Override for the shortest collapsed run

    Returns:
        DiffResult with the filtered rows and their collapsed sections
    """
    original_lines = split_lines(original)
    ghost_lines = split_lines(ghost)

    with track_time("align", original_lines=len(original_lines), ghost_lines=len(ghost_lines)):
        aligned = align_lines(original_lines, ghost_lines, lookahead_window=lookahead_window)

    with track_time("filter_false_positives"):
        filtered = filter_false_positives(aligned)

    with track_time("collapse"):
        sections = create_collapsed_sections(filtered, min_run=min_run)

    result = DiffResult(diff_lines=tuple(filtered), collapsed_sections=tuple(sections))
    logger.debug(
        "Comparison complete: %d rows, %d differences, %d collapsed sections",
        len(result.diff_lines),
        result.difference_count,
        len(result.collapsed_sections),
    )
    return result
