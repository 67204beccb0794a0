from __future__ import annotations

import pytest

from comparison.key_extraction import extract_key


@pytest.mark.parametrize(
    "line, expected",
    [
        ('"name": "Alice"', "name"),
        ('    "name" : 1,', "name"),
        ('"first name": true', "first name"),
        ("name: Alice", "name"),
        ("  nested key: value", "nested key"),
        ("url: https://example.com", "url"),
        ('"url": "https://example.com"', "url"),
        ("empty:", "empty"),
    ],
)
def test_extract_key_json_and_yaml_styles(line, expected):
    assert extract_key(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "{", "}", "],", "[1, 2]", "- item", "plain text", ":"])
def test_extract_key_returns_none_without_key(line):
    assert extract_key(line) is None


def test_quoted_pattern_takes_precedence_over_bare_pattern():
    # The bare pattern alone would keep the quotes ('"key"').
    assert extract_key('"key": "v: w"') == "key"


def test_spurious_keys_are_accepted_approximations():
    # Colons in free text still yield a key.
    assert extract_key("see https://example.com") == "see https"
    assert extract_key("- name: x") == "- name"
