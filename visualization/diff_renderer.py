"""Render a DiffResult as plain text rows."""
from __future__ import annotations

from typing import List, Optional

from comparison.models import DiffLine, DiffLineType, DiffResult
from comparison.navigation import SectionExpansion, VisibleRow
from config.settings import settings

# Marker per row type
MARKERS = {
    DiffLineType.MATCH: " ",
    DiffLineType.ONLY_IN_ORIGINAL: "-",
    DiffLineType.ONLY_IN_GHOST: "+",
    DiffLineType.MODIFIED: "~",
}

SECTION_EXPANDED = "▾"
SECTION_COLLAPSED = "▸"


def _gutter(line_number: Optional[int], width: int) -> str:
    if line_number is None:
        return " " * width
    return str(line_number + 1).rjust(width)


def _single_line(line_number: Optional[int], content: Optional[str], marker: str, label: Optional[str], width: int) -> str:
    label_text = f"{label:<8} " if label else ""
    return f"{_gutter(line_number, width)} {marker} {label_text}{content or ''}".rstrip()


def render_line(line: DiffLine, *, gutter_width: Optional[int] = None) -> List[str]:
    """
    Render one diff line.

    Matches show a single unlabeled row; modified lines show the original row
    stacked above the ghost row.
    """
    width = settings.render_gutter_width if gutter_width is None else gutter_width
    marker = MARKERS[line.type]

    if line.type == DiffLineType.MATCH:
        return [_single_line(line.original_line_number, line.original_content, marker, None, width)]
    if line.type == DiffLineType.MODIFIED:
        return [
            _single_line(line.original_line_number, line.original_content, marker, "Original", width),
            _single_line(line.ghost_line_number, line.ghost_content, marker, "Ghost", width),
        ]
    if line.type == DiffLineType.ONLY_IN_ORIGINAL:
        return [_single_line(line.original_line_number, line.original_content, marker, "Original", width)]
    return [_single_line(line.ghost_line_number, line.ghost_content, marker, "Ghost", width)]


def _render_row(row: VisibleRow, gutter_width: Optional[int]) -> List[str]:
    if row.is_section_header:
        icon = SECTION_EXPANDED if row.expanded else SECTION_COLLAPSED
        header = f"{icon} {row.section.display_text}"
        if row.section.preview:
            header += f"  {row.section.preview}"
        return [header]
    return render_line(row.line, gutter_width=gutter_width)


def render_text(
    result: DiffResult,
    expansion: Optional[SectionExpansion] = None,
    *,
    gutter_width: Optional[int] = None,
) -> str:
    """
    Render a whole result, honoring which sections are folded.

    Args:
        result: Comparison result
        expansion: Folding state; defaults to the configured initial state
        gutter_width: Width of the line-number column

    Returns:
        Multi-line string without a trailing newline
    """
    if expansion is None:
        expansion = SectionExpansion(result)

    rows: List[str] = []
    for row in expansion.visible_rows():
        rows.extend(_render_row(row, gutter_width))
    return "\n".join(rows)


def render_legend() -> str:
    return "Legend: - In Original Only   + In Ghost   ~ Modified"
