from __future__ import annotations

from comparison.ghost_overlay import compare
from comparison.models import DiffLine
from comparison.navigation import SectionExpansion
from visualization.diff_renderer import render_legend, render_line, render_text


def test_render_line_one_sided_rows():
    assert render_line(DiffLine.only_in_ghost(2, "new"), gutter_width=3) == ["  3 + Ghost    new"]
    assert render_line(DiffLine.only_in_original(0, "old"), gutter_width=3) == ["  1 - Original old"]


def test_render_line_match_is_unlabeled():
    assert render_line(DiffLine.match(9, "  a: 1", 4, "a: 1"), gutter_width=3) == [" 10     a: 1"]


def test_render_line_modified_stacks_both_sides():
    rows = render_line(DiffLine.modified(1, "b: 2", 1, "b: 5"), gutter_width=3)
    assert rows == ["  2 ~ Original b: 2", "  2 ~ Ghost    b: 5"]


def test_render_text_respects_folding():
    result = compare("1\n2\n3\n4\nx", "1\n2\n3\n4\ny")

    collapsed = render_text(result, SectionExpansion(result, expanded_by_default=False)).splitlines()
    assert collapsed[0] == "▸ Lines 1-4 match (4 lines)  1 2"
    assert len(collapsed) == 3

    expanded = render_text(result, SectionExpansion(result, expanded_by_default=True)).splitlines()
    assert expanded[0].startswith("▾ Lines 1-4 match")
    assert len(expanded) == 7


def test_render_legend_mentions_markers():
    legend = render_legend()
    assert "- In Original Only" in legend
    assert "+ In Ghost" in legend
