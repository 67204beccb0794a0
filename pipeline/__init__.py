"""Pipeline module - orchestrates file loading and comparison."""
from pipeline.file_compare import (
    compare_files,
    load_text,
    main,
    FileComparison,
)

__all__ = [
    "compare_files",
    "load_text",
    "main",
    "FileComparison",
]
