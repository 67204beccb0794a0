"""Similarity scoring for modified line pairs (reporting only)."""
from __future__ import annotations

from typing import Optional

from rapidfuzz import fuzz

from comparison.models import DiffLine, DiffLineType
from utils.text_lines import trim


def line_similarity(text_a: Optional[str], text_b: Optional[str]) -> float:
    """Return a 0.0-1.0 similarity of two lines after trimming."""
    norm_a = trim(text_a)
    norm_b = trim(text_b)
    if not norm_a and not norm_b:
        return 1.0
    if not norm_a or not norm_b:
        return 0.0
    return fuzz.ratio(norm_a, norm_b) / 100.0


def diff_line_similarity(line: DiffLine) -> Optional[float]:
    """
    Score how close the two sides of a row are.

    Matches score 1.0, one-sided rows have no score. Never used to classify
    lines, only to annotate modified rows in reports.
    """
    if line.type == DiffLineType.MATCH:
        return 1.0
    if line.type == DiffLineType.MODIFIED:
        return line_similarity(line.original_content, line.ghost_content)
    return None
