"""Fold long runs of matching rows into collapsible sections."""
from __future__ import annotations

from typing import List, Optional, Sequence

from comparison.models import CollapsedSection, DiffLine
from config.settings import settings
from utils.text_lines import trim


def build_preview(
    diff_lines: Sequence[DiffLine],
    start: int,
    end: int,
    *,
    line_count: Optional[int] = None,
    max_chars: Optional[int] = None,
    ellipsis: Optional[str] = None,
) -> str:
    """Join the first lines of a run (original side, trimmed) and truncate."""
    line_count = settings.preview_line_count if line_count is None else line_count
    max_chars = settings.preview_max_chars if max_chars is None else max_chars
    ellipsis = settings.preview_ellipsis if ellipsis is None else ellipsis

    last = min(start + line_count - 1, end)
    preview = " ".join(
        trim(line.original_content)
        for line in diff_lines[start:last + 1]
        if line.original_content is not None
    )
    if len(preview) > max_chars:
        return preview[:max_chars] + ellipsis
    return preview


def create_collapsed_sections(
    diff_lines: Sequence[DiffLine],
    *,
    min_run: Optional[int] = None,
    preview_max_chars: Optional[int] = None,
) -> List[CollapsedSection]:
    """
    Find runs of consecutive match rows long enough to fold.

    Args:
        diff_lines: Final (already filtered) aligned rows
        min_run: Shortest run that is folded (defaults to settings, 3)
        preview_max_chars: Preview truncation length (defaults to settings, 60)

    Returns:
        Disjoint sections in ascending order of start_line. Shorter runs are
        left as individual rows.
    """
    min_run = settings.collapse_min_run if min_run is None else min_run

    sections: List[CollapsedSection] = []
    run_start: Optional[int] = None

    def close_run(end_exclusive: int) -> None:
        count = end_exclusive - run_start
        if count >= min_run:
            sections.append(
                CollapsedSection(
                    start_line=run_start,
                    end_line=end_exclusive - 1,
                    line_count=count,
                    preview=build_preview(diff_lines, run_start, end_exclusive - 1, max_chars=preview_max_chars),
                )
            )

    for index, line in enumerate(diff_lines):
        if line.is_match:
            if run_start is None:
                run_start = index
        elif run_start is not None:
            close_run(index)
            run_start = None

    if run_start is not None:
        close_run(len(diff_lines))

    return sections
