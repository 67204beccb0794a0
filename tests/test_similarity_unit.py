from __future__ import annotations

import pytest

from comparison.models import DiffLine
from comparison.similarity import diff_line_similarity, line_similarity


def test_line_similarity_bounds():
    assert line_similarity("abc", "abc") == 1.0
    assert line_similarity("  abc ", "abc") == 1.0
    assert line_similarity("", None) == 1.0
    assert line_similarity("abc", "") == 0.0
    assert 0.0 < line_similarity('"name": "Alice"', '"name": "Bob"') < 1.0


def test_diff_line_similarity_by_type():
    assert diff_line_similarity(DiffLine.match(0, "a", 0, "a")) == 1.0
    assert diff_line_similarity(DiffLine.modified(0, "port: 80", 0, "port: 8080")) == pytest.approx(
        line_similarity("port: 80", "port: 8080")
    )
    assert diff_line_similarity(DiffLine.only_in_ghost(0, "x")) is None
    assert diff_line_similarity(DiffLine.only_in_original(0, "x")) is None
