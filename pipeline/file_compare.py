"""
File-level orchestration: load two documents, compare them, report.

Provides a single entrypoint that:
1. Validates and decodes both files
2. Runs the ghost overlay comparison
3. Optionally exports a JSON report
4. Renders a text view for the command line
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from comparison.ghost_overlay import compare
from comparison.models import DiffResult
from comparison.navigation import SectionExpansion
from config.settings import settings
from export.json_exporter import export_json
from utils.logging import configure_logging, logger
from utils.performance import Timing, log_performance_summary, track_time
from utils.validation import InputValidationError, validate_text_path
from visualization.diff_renderer import render_legend, render_text

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_INPUT_ERROR = 2


@dataclass
class FileComparison:
    original_path: Path
    ghost_path: Path
    result: DiffResult
    timings: List[Timing] = field(default_factory=list)

    @property
    def duration(self) -> float:
        return sum(t.duration for t in self.timings)


def load_text(path: str | Path, encoding: Optional[str] = None) -> str:
    """Validate a path and decode its contents."""
    text_path = validate_text_path(path)
    encoding = encoding or settings.file_encoding
    try:
        text = text_path.read_bytes().decode(encoding)
    except UnicodeDecodeError as exc:
        raise InputValidationError(f"Cannot decode {text_path} as {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise InputValidationError(f"Cannot read {text_path}: {exc}") from exc
    logger.info("Loaded %s (%d characters)", text_path, len(text))
    return text


def compare_files(original_path: str | Path, ghost_path: str | Path) -> FileComparison:
    """
    Compare two files on disk.

    Raises:
        InputValidationError: if either file is missing, unsupported, too large
            unreadable or not decodable
    """
    timings: List[Timing] = []
    with track_time("load", collector=timings):
        original = load_text(original_path)
        ghost = load_text(ghost_path)

    with track_time("compare", collector=timings):
        result = compare(original, ghost)

    logger.info("%s vs %s: %s", original_path, ghost_path, result.difference_label())
    return FileComparison(
        original_path=Path(original_path),
        ghost_path=Path(ghost_path),
        result=result,
        timings=timings,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare an original JSON/YAML file against a ghost version line by line.",
    )
    parser.add_argument("original", help="Baseline file")
    parser.add_argument("ghost", help="Candidate file compared against the baseline")
    parser.add_argument("--json", dest="json_path", default=None, help="Write a JSON report to this path")
    parser.add_argument("--collapse", action="store_true", help="Fold runs of matching lines")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    parser.add_argument("--profile", action="store_true", help="Log stage timings")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        comparison = compare_files(args.original, args.ghost)
    except InputValidationError as exc:
        logger.error("%s", exc)
        return EXIT_INPUT_ERROR

    result = comparison.result
    if args.json_path:
        try:
            export_json(
                result,
                args.json_path,
                original_name=str(comparison.original_path),
                ghost_name=str(comparison.ghost_path),
            )
        except OSError as exc:
            logger.error("Cannot write report %s: %s", args.json_path, exc)
            return EXIT_INPUT_ERROR

    expansion = SectionExpansion(result, expanded_by_default=not args.collapse)
    print(f"Original: {comparison.original_path}")
    print(f"Ghost:    {comparison.ghost_path}")
    print(result.difference_label())
    print(render_text(result, expansion))
    print(render_legend())

    if args.profile:
        log_performance_summary(comparison.timings)

    return EXIT_IDENTICAL if result.is_identical else EXIT_DIFFERENT


if __name__ == "__main__":
    sys.exit(main())
