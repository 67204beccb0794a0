"""Line-level alignment of an original document against a ghost document."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from comparison.key_extraction import extract_key
from comparison.lookahead import LookaheadMatch, find_matching_line
from comparison.models import DiffLine
from config.settings import settings
from utils.logging import logger
from utils.text_lines import trim


class AmbiguousStep(str, Enum):
    """Outcome of a step where neither content nor key agrees."""

    INSERTION = "insertion"  # current ghost line is new
    DELETION = "deletion"  # current original line was removed
    MODIFICATION = "modification"  # no reordering signal


def resolve_ambiguous_step(in_ghost: LookaheadMatch, in_original: LookaheadMatch) -> AmbiguousStep:
    """
    Decide how to consume a pair whose contents and keys differ.

    Args:
        in_ghost: Where the current original line reappears in the ghost lookahead
        in_original: Where the current ghost line reappears in the original lookahead

    Returns:
        INSERTION when the original line shows up in the ghost document no
        later than the ghost line shows up in the original (ties go to the
        ghost side), DELETION when only the ghost line reappears, and
        MODIFICATION otherwise.
    """
    if in_ghost.found and (not in_original.found or in_ghost.offset <= in_original.offset):
        return AmbiguousStep.INSERTION
    if in_original.found:
        return AmbiguousStep.DELETION
    return AmbiguousStep.MODIFICATION


def align_lines(
    original_lines: Sequence[str],
    ghost_lines: Sequence[str],
    *,
    lookahead_window: Optional[int] = None,
) -> List[DiffLine]:
    """
    Walk both documents with two cursors and classify one row per step.

    Steps, in priority order:
    1. only the original has lines left -> only_in_original
    2. only the ghost has lines left -> only_in_ghost
    3. trimmed contents equal -> match
    4. both lines have the same structural key -> modified
    5. otherwise decide with a bounded lookahead (see resolve_ambiguous_step)

    Args:
        original_lines: Lines of the baseline document
        ghost_lines: Lines of the candidate document
        lookahead_window: Lines searched ahead in step 5 (defaults to settings)

    Returns:
        Ordered DiffLines; original and ghost indices are strictly increasing
        and every source line appears exactly once.
    """
    window = settings.lookahead_window if lookahead_window is None else lookahead_window

    result: List[DiffLine] = []
    original_index = 0
    ghost_index = 0
    original_count = len(original_lines)
    ghost_count = len(ghost_lines)

    while original_index < original_count or ghost_index < ghost_count:
        if ghost_index >= ghost_count:
            result.append(DiffLine.only_in_original(original_index, original_lines[original_index]))
            original_index += 1
            continue

        if original_index >= original_count:
            result.append(DiffLine.only_in_ghost(ghost_index, ghost_lines[ghost_index]))
            ghost_index += 1
            continue

        original_line = original_lines[original_index]
        ghost_line = ghost_lines[ghost_index]
        trimmed_original = trim(original_line)
        trimmed_ghost = trim(ghost_line)

        if trimmed_original == trimmed_ghost:
            result.append(DiffLine.match(original_index, original_line, ghost_index, ghost_line))
            original_index += 1
            ghost_index += 1
            continue

        original_key = extract_key(trimmed_original)
        ghost_key = extract_key(trimmed_ghost)
        if original_key is not None and ghost_key is not None and original_key == ghost_key:
            result.append(DiffLine.modified(original_index, original_line, ghost_index, ghost_line))
            original_index += 1
            ghost_index += 1
            continue

        in_ghost = find_matching_line(trimmed_original, ghost_lines[ghost_index:ghost_index + window], window)
        in_original = find_matching_line(trimmed_ghost, original_lines[original_index:original_index + window], window)
        step = resolve_ambiguous_step(in_ghost, in_original)

        if step == AmbiguousStep.INSERTION:
            result.append(DiffLine.only_in_ghost(ghost_index, ghost_line))
            ghost_index += 1
        elif step == AmbiguousStep.DELETION:
            result.append(DiffLine.only_in_original(original_index, original_line))
            original_index += 1
        else:
            result.append(DiffLine.modified(original_index, original_line, ghost_index, ghost_line))
            original_index += 1
            ghost_index += 1

    logger.debug(
        "Aligned %d original lines -> %d ghost lines in %d rows",
        original_count,
        ghost_count,
        len(result),
    )
    return result
