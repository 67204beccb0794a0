"""Presentation state for browsing a DiffResult: navigation, folding, staleness."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Set

from comparison.ghost_overlay import compare
from comparison.models import CollapsedSection, DiffLine, DiffResult
from config.settings import settings
from utils.logging import logger


class DifferenceNavigator:
    """Cycle through the differences of a result ("next" / "previous")."""

    def __init__(self, result: DiffResult):
        self._result = result
        self._positions = result.difference_indices
        self._current = 0

    @property
    def current(self) -> int:
        """Index into the difference list (not a sequence position)."""
        return self._current

    @property
    def current_position(self) -> Optional[int]:
        if not self._positions:
            return None
        return self._positions[self._current]

    def current_line(self) -> Optional[DiffLine]:
        position = self.current_position
        if position is None:
            return None
        return self._result.line_at(position)

    def next(self) -> Optional[int]:
        """Move to the next difference, wrapping to the first; returns its position."""
        if not self._positions:
            return None
        self._current = (self._current + 1) % len(self._positions)
        return self.current_position

    def previous(self) -> Optional[int]:
        """Move to the previous difference, wrapping to the last; returns its position."""
        if not self._positions:
            return None
        self._current = (self._current - 1) % len(self._positions)
        return self.current_position

    def position_label(self) -> str:
        if not self._positions:
            return "0 / 0"
        return f"{self._current + 1} / {len(self._positions)}"

    def jump_target(self) -> Optional[int]:
        """Ghost-side line number of the current difference, if it has one."""
        line = self.current_line()
        if line is None:
            return None
        return line.ghost_line_number

    def jump_target_at(self, position: int) -> Optional[int]:
        """Ghost-side line number for any row, e.g. one a viewer clicked on."""
        if not 0 <= position < len(self._result.diff_lines):
            return None
        return self._result.line_at(position).ghost_line_number


@dataclass(frozen=True)
class VisibleRow:
    """One row a viewer shows: either a section header or a diff line."""

    position: int
    line: Optional[DiffLine] = None
    section: Optional[CollapsedSection] = None
    expanded: bool = False

    @property
    def is_section_header(self) -> bool:
        return self.section is not None and self.line is None


class SectionExpansion:
    """
    Which collapsed sections are currently unfolded.

    Sections are identified by their start position, which is stable for the
    lifetime of one result.
    """

    def __init__(self, result: DiffResult, expanded_by_default: Optional[bool] = None):
        if expanded_by_default is None:
            expanded_by_default = settings.expand_sections_by_default
        self._result = result
        self._expanded: Set[int] = set()
        if expanded_by_default:
            self.expand_all()

    def is_expanded(self, section: CollapsedSection) -> bool:
        return section.start_line in self._expanded

    def toggle(self, section: CollapsedSection) -> bool:
        """Flip a section and return its new expanded state."""
        if section.start_line in self._expanded:
            self._expanded.discard(section.start_line)
            return False
        self._expanded.add(section.start_line)
        return True

    def expand_all(self) -> None:
        self._expanded = {section.start_line for section in self._result.collapsed_sections}

    def collapse_all(self) -> None:
        self._expanded.clear()

    def visible_rows(self) -> Iterator[VisibleRow]:
        """
        Yield rows in display order.

        A section contributes its header once, at its start, followed by its
        lines only while expanded. Lines outside sections are always shown.
        """
        sections = self._result.collapsed_sections
        cursor = 0
        for position, line in enumerate(self._result.diff_lines):
            while cursor < len(sections) and sections[cursor].end_line < position:
                cursor += 1
            section = sections[cursor] if cursor < len(sections) and sections[cursor].contains(position) else None
            if section is None:
                yield VisibleRow(position=position, line=line)
                continue

            expanded = self.is_expanded(section)
            if position == section.start_line:
                yield VisibleRow(position=position, section=section, expanded=expanded)
            if expanded:
                yield VisibleRow(position=position, line=line, section=section, expanded=True)


class ComparisonSession:
    """
    Holds the latest comparison of two texts for a live view.

    Every update bumps a generation counter; a caller that computed a result
    for an older generation can check ``is_current`` before using it.
    """

    def __init__(self):
        self._generation = 0
        self.result: Optional[DiffResult] = None
        self.navigator: Optional[DifferenceNavigator] = None
        self.expansion: Optional[SectionExpansion] = None

    @property
    def generation(self) -> int:
        return self._generation

    def update(self, original: Optional[str], ghost: Optional[str]) -> int:
        """Recompare (or clear when either side is missing) and return the new generation."""
        self._generation += 1
        if original is None or ghost is None:
            logger.debug("Missing document, clearing comparison (generation %d)", self._generation)
            self.result = None
            self.navigator = None
            self.expansion = None
            return self._generation

        self.result = compare(original, ghost)
        self.navigator = DifferenceNavigator(self.result)
        self.expansion = SectionExpansion(self.result)
        logger.debug(
            "Generation %d: %s",
            self._generation,
            self.result.difference_label(),
        )
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation
