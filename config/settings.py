"""Configuration management for alignment, collapsing and file loading settings."""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Alignment
    lookahead_window: int = Field(
        default=5,
        ge=0,
        description="Lines searched ahead for a displaced match before calling a pair modified",
    )

    # Collapsing
    collapse_min_run: int = Field(
        default=3,
        ge=1,
        description="Minimum run of consecutive matching lines folded into one section",
    )
    preview_line_count: int = Field(
        default=2,
        ge=1,
        description="Number of leading lines of a collapsed section used for its preview",
    )
    preview_max_chars: int = Field(
        default=60,
        ge=0,
        description="Maximum preview length before truncation",
    )
    preview_ellipsis: str = Field(
        default="…",
        description="Marker appended to a truncated preview",
    )

    # File loading
    supported_extensions: List[str] = Field(
        default=[".json", ".yaml", ".yml", ".txt"],
        description="File extensions accepted by the file loader",
    )
    max_file_bytes: int = Field(
        default=5 * 1024 * 1024,
        description="Largest file the loader will read (5 MiB)",
    )
    file_encoding: str = Field(
        default="utf-8",
        description="Encoding used to decode compared files",
    )

    # Presentation
    expand_sections_by_default: bool = Field(
        default=True,
        description="Initial expanded state of collapsed sections in a new comparison",
    )
    render_gutter_width: int = Field(
        default=5,
        description="Width of the line-number gutter in the text renderer",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level used by the command line host")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GHOSTDIFF_",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Return a cached settings instance."""
    return _get_settings()


@lru_cache()
def _get_settings() -> Settings:
    return Settings()


settings = get_settings()
