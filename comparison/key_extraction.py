"""Heuristic structural key extraction for JSON- and YAML-shaped lines."""
from __future__ import annotations

import re
from typing import Optional

# Quoted keys are always tried before bare keys.
_JSON_KEY_RE = re.compile(r'^\s*"([^"]+)"\s*:')
_YAML_KEY_RE = re.compile(r"^\s*([^:]+):")


def extract_key(line: str) -> Optional[str]:
    """
    Extract the field name of a key/value line.

    This is a classification hint, not a parser: a colon inside a value can
    produce a spurious key (``https://x`` yields ``https``).

    Args:
        line: A single line of text, trimmed or not

    Returns:
        The key without quotes or colons, or None when the line has no key
        (brackets, blank lines, list items without a colon).

    Examples:
        >>> extract_key('  "name": "Alice",')
        'name'
        >>> extract_key("name: Alice")
        'name'
        >>> extract_key("- item") is None
        True
    """
    trimmed = line.strip()

    match = _JSON_KEY_RE.match(trimmed)
    if match:
        return match.group(0).replace('"', "").replace(":", "").strip()

    match = _YAML_KEY_RE.match(trimmed)
    if match:
        return match.group(0).replace(":", "").strip()

    return None
