"""Line splitting and trimming shared by every comparison stage."""
from __future__ import annotations

import re
from typing import List, Optional

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """
    Split text into lines on any newline convention.

    A trailing newline produces a trailing empty line and the empty string
    produces a single empty line, so both compared documents are always
    split by the same rule.

    Examples:
        >>> split_lines("a\\nb")
        ['a', 'b']
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b', '']
        >>> split_lines("")
        ['']
    """
    return _NEWLINE_RE.split(text)


def trim(line: Optional[str]) -> str:
    """Strip surrounding whitespace; None becomes the empty string."""
    if line is None:
        return ""
    return line.strip()
