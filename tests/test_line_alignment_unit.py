"""Unit tests for the two-cursor line alignment."""

from __future__ import annotations

import pytest

from comparison.line_alignment import AmbiguousStep, align_lines, resolve_ambiguous_step
from comparison.lookahead import LookaheadMatch
from comparison.models import DiffLineType

M = DiffLineType.MATCH
MOD = DiffLineType.MODIFIED
ORIG = DiffLineType.ONLY_IN_ORIGINAL
GHOST = DiffLineType.ONLY_IN_GHOST


def _types(rows):
    return [row.type for row in rows]


def _assert_coverage_and_order(rows, original, ghost):
    original_numbers = [r.original_line_number for r in rows if r.original_line_number is not None]
    ghost_numbers = [r.ghost_line_number for r in rows if r.ghost_line_number is not None]
    assert original_numbers == list(range(len(original)))
    assert ghost_numbers == list(range(len(ghost)))


def test_identical_documents_align_as_matches():
    lines = ["{", '  "a": 1,', '  "b": 2', "}"]
    rows = align_lines(lines, list(lines))
    assert _types(rows) == [M, M, M, M]
    assert [r.original_line_number for r in rows] == [0, 1, 2, 3]
    assert [r.ghost_line_number for r in rows] == [0, 1, 2, 3]


def test_whitespace_only_changes_match_and_keep_raw_content():
    rows = align_lines(["  a: 1"], ["a: 1\t"])
    assert _types(rows) == [M]
    assert rows[0].original_content == "  a: 1"
    assert rows[0].ghost_content == "a: 1\t"


def test_exhausted_sides_emit_one_sided_rows():
    rows = align_lines(["a", "b"], [])
    assert _types(rows) == [ORIG, ORIG]
    assert [r.original_line_number for r in rows] == [0, 1]
    assert all(r.ghost_line_number is None for r in rows)

    rows = align_lines([], ["x"])
    assert _types(rows) == [GHOST]
    assert rows[0].ghost_content == "x"


def test_same_key_different_value_is_modified():
    rows = align_lines(['"name": "Alice"'], ['"name": "Bob"'])
    assert _types(rows) == [MOD]
    assert rows[0].original_content == '"name": "Alice"'
    assert rows[0].ghost_content == '"name": "Bob"'


def test_insertion_detected_by_lookahead():
    original = ["a", "c"]
    ghost = ["a", "b", "c"]
    rows = align_lines(original, ghost)
    assert _types(rows) == [M, GHOST, M]
    assert rows[1].ghost_line_number == 1
    _assert_coverage_and_order(rows, original, ghost)


def test_deletion_detected_by_lookahead():
    original = ["a", "b", "c"]
    ghost = ["a", "c"]
    rows = align_lines(original, ghost)
    assert _types(rows) == [M, ORIG, M]
    assert rows[1].original_line_number == 1
    _assert_coverage_and_order(rows, original, ghost)


def test_unrelated_lines_without_signal_are_modified():
    assert _types(align_lines(["x"], ["y"])) == [MOD]


def test_tie_prefers_ghost_insertion():
    rows = align_lines(["a", "b"], ["b", "a"])
    assert _types(rows) == [GHOST, M, ORIG]
    assert rows[0].ghost_content == "b"
    assert rows[2].original_content == "b"


def test_zero_window_disables_reordering(monkeypatch):
    from comparison import line_alignment

    monkeypatch.setattr(line_alignment.settings, "lookahead_window", 0, raising=False)
    rows = align_lines(["a", "c"], ["a", "b", "c"])
    assert _types(rows) == [M, MOD, GHOST]


def test_explicit_window_overrides_settings():
    rows = align_lines(["a", "c"], ["a", "b", "c"], lookahead_window=0)
    assert _types(rows) == [M, MOD, GHOST]


@pytest.mark.parametrize(
    "in_ghost, in_original, expected",
    [
        (LookaheadMatch(True, 1), LookaheadMatch(True, 1), AmbiguousStep.INSERTION),
        (LookaheadMatch(True, 1), LookaheadMatch(True, 2), AmbiguousStep.INSERTION),
        (LookaheadMatch(True, 0), LookaheadMatch(False, -1), AmbiguousStep.INSERTION),
        (LookaheadMatch(True, 3), LookaheadMatch(True, 1), AmbiguousStep.DELETION),
        (LookaheadMatch(False, -1), LookaheadMatch(True, 4), AmbiguousStep.DELETION),
        (LookaheadMatch(False, -1), LookaheadMatch(False, -1), AmbiguousStep.MODIFICATION),
    ],
)
def test_resolve_ambiguous_step_priority(in_ghost, in_original, expected):
    assert resolve_ambiguous_step(in_ghost, in_original) is expected


@pytest.mark.parametrize(
    "original, ghost",
    [
        (["a", "b", "c"], ["c", "b", "a"]),
        (["{", '"a": 1', '"b": 2', "}"], ["{", '"b": 2', '"c": 3', '"a": 1', "}"]),
        (["x"] * 4, ["x", "y", "x"]),
        (["k: 1", "- a", "- b", "", "z"], ["", "k: 2", "- b", "- a", "q", "z", "w"]),
        ([], []),
    ],
)
def test_every_line_consumed_once_in_increasing_order(original, ghost):
    rows = align_lines(original, ghost)
    _assert_coverage_and_order(rows, original, ghost)
