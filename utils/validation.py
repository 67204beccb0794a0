"""Input validation helpers."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

from config.settings import settings


class InputValidationError(ValueError):
    """Raised when a file cannot be accepted for comparison."""


def validate_text_path(
    path: str | os.PathLike,
    *,
    extensions: Optional[Iterable[str]] = None,
    max_bytes: Optional[int] = None,
) -> Path:
    text_path = Path(path)
    allowed = {ext.lower() for ext in (extensions if extensions is not None else settings.supported_extensions)}
    limit = settings.max_file_bytes if max_bytes is None else max_bytes

    if not text_path.is_file():
        raise InputValidationError(f"File not found: {text_path}")
    if text_path.suffix.lower() not in allowed:
        raise InputValidationError(f"Unsupported file type: {text_path.suffix or '(none)'}")
    size = text_path.stat().st_size
    if size > limit:
        raise InputValidationError(f"File too large: {text_path} ({size} bytes, limit {limit})")
    return text_path
