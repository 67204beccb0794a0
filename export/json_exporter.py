"""Export diff results as JSON."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from comparison.models import DiffResult
from comparison.similarity import diff_line_similarity
from utils.logging import logger


def result_to_dict(
    result: DiffResult,
    original_name: Optional[str] = None,
    ghost_name: Optional[str] = None,
) -> dict:
    """
    Build a JSON-serializable payload for a comparison result.

    Line numbers are kept zero-based, matching DiffLine. Modified rows carry a
    0.0-1.0 similarity score for reviewers; it plays no part in classification.
    """
    lines_data = []
    for position, line in enumerate(result.diff_lines):
        line_dict = {
            "position": position,
            "type": line.type.value,
            "original_line_number": line.original_line_number,
            "ghost_line_number": line.ghost_line_number,
            "original_content": line.original_content,
            "ghost_content": line.ghost_content,
        }
        if line.is_difference:
            similarity = diff_line_similarity(line)
            if similarity is not None:
                line_dict["similarity"] = round(similarity, 4)
        lines_data.append(line_dict)

    return {
        "metadata": {"original": original_name, "ghost": ghost_name},
        "summary": result.summary(),
        "difference_indices": list(result.difference_indices),
        "collapsed_sections": [
            {
                "start_line": section.start_line,
                "end_line": section.end_line,
                "line_count": section.line_count,
                "preview": section.preview,
                "display_text": section.display_text,
            }
            for section in result.collapsed_sections
        ],
        "lines": lines_data,
    }


def export_json(
    result: DiffResult,
    output_path: str | Path,
    original_name: Optional[str] = None,
    ghost_name: Optional[str] = None,
) -> Path:
    """Write a comparison result as JSON and return the output path."""
    output = Path(output_path)
    logger.info("Writing JSON diff to %s", output)

    payload = result_to_dict(result, original_name=original_name, ghost_name=ghost_name)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return output
