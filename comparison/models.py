"""Shared data models for line alignment and diff results."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class DiffLineType(str, Enum):
    MATCH = "match"
    ONLY_IN_ORIGINAL = "only_in_original"  # deleted in ghost
    ONLY_IN_GHOST = "only_in_ghost"  # added in ghost
    MODIFIED = "modified"


class DiffLineInvariantError(ValueError):
    """Raised when a DiffLine does not carry the sides its type requires."""


_REQUIRED_SIDES: Dict[DiffLineType, Tuple[bool, bool]] = {
    DiffLineType.MATCH: (True, True),
    DiffLineType.MODIFIED: (True, True),
    DiffLineType.ONLY_IN_ORIGINAL: (True, False),
    DiffLineType.ONLY_IN_GHOST: (False, True),
}


@dataclass(frozen=True)
class DiffLine:
    """
    One aligned row of a comparison.

    Line numbers are zero-based indices into the source documents. Content is
    the untrimmed source line; comparisons always trim it first.
    """

    original_line_number: Optional[int]
    ghost_line_number: Optional[int]
    original_content: Optional[str]
    ghost_content: Optional[str]
    type: DiffLineType

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", DiffLineType(self.type))
        has_original = self.original_line_number is not None and self.original_content is not None
        has_ghost = self.ghost_line_number is not None and self.ghost_content is not None
        no_original = self.original_line_number is None and self.original_content is None
        no_ghost = self.ghost_line_number is None and self.ghost_content is None

        want_original, want_ghost = _REQUIRED_SIDES[self.type]
        if (want_original and not has_original) or (not want_original and not no_original):
            raise DiffLineInvariantError(
                f"{self.type.value} line has an inconsistent original side"
            )
        if (want_ghost and not has_ghost) or (not want_ghost and not no_ghost):
            raise DiffLineInvariantError(
                f"{self.type.value} line has an inconsistent ghost side"
            )

    @classmethod
    def match(cls, original_index: int, original: str, ghost_index: int, ghost: str) -> "DiffLine":
        return cls(original_index, ghost_index, original, ghost, DiffLineType.MATCH)

    @classmethod
    def modified(cls, original_index: int, original: str, ghost_index: int, ghost: str) -> "DiffLine":
        return cls(original_index, ghost_index, original, ghost, DiffLineType.MODIFIED)

    @classmethod
    def only_in_original(cls, original_index: int, original: str) -> "DiffLine":
        return cls(original_index, None, original, None, DiffLineType.ONLY_IN_ORIGINAL)

    @classmethod
    def only_in_ghost(cls, ghost_index: int, ghost: str) -> "DiffLine":
        return cls(None, ghost_index, None, ghost, DiffLineType.ONLY_IN_GHOST)

    @property
    def is_match(self) -> bool:
        return self.type == DiffLineType.MATCH

    @property
    def is_difference(self) -> bool:
        return not self.is_match


@dataclass(frozen=True)
class CollapsedSection:
    """
    A run of matching lines that a viewer may fold away.

    start_line and end_line are inclusive positions in DiffResult.diff_lines,
    not line numbers of either document. Whether the section is currently
    expanded is presentation state and is tracked outside this object, keyed
    by start_line.
    """

    start_line: int
    end_line: int
    line_count: int
    preview: str = ""

    @property
    def display_text(self) -> str:
        return f"Lines {self.start_line + 1}-{self.end_line + 1} match ({self.line_count} lines)"

    def contains(self, index: int) -> bool:
        return self.start_line <= index <= self.end_line


@dataclass(frozen=True)
class DiffResult:
    diff_lines: Tuple[DiffLine, ...] = ()
    collapsed_sections: Tuple[CollapsedSection, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but always store tuples.
        object.__setattr__(self, "diff_lines", tuple(self.diff_lines))
        object.__setattr__(self, "collapsed_sections", tuple(self.collapsed_sections))

    @property
    def difference_count(self) -> int:
        return sum(1 for line in self.diff_lines if line.is_difference)

    @property
    def difference_indices(self) -> Tuple[int, ...]:
        return tuple(idx for idx, line in enumerate(self.diff_lines) if line.is_difference)

    @property
    def is_identical(self) -> bool:
        return self.difference_count == 0

    def line_at(self, index: int) -> DiffLine:
        return self.diff_lines[index]

    def section_at(self, index: int) -> Optional[CollapsedSection]:
        """Return the collapsed section covering a sequence position, if any."""
        for section in self.collapsed_sections:
            if section.contains(index):
                return section
            if section.start_line > index:
                break
        return None

    def difference_label(self) -> str:
        count = self.difference_count
        return f"{count} difference{'' if count == 1 else 's'} found"

    def summary(self) -> dict:
        """
        Get per-type counts for reporting.

        Returns:
            Dictionary with one count per DiffLineType value plus:
            - total_lines: length of the aligned sequence
            - difference_count: number of non-matching rows
            - collapsed_sections: number of foldable sections
        """
        counts = {line_type.value: 0 for line_type in DiffLineType}
        for line in self.diff_lines:
            counts[line.type.value] += 1
        counts["total_lines"] = len(self.diff_lines)
        counts["difference_count"] = self.difference_count
        counts["collapsed_sections"] = len(self.collapsed_sections)
        return counts
