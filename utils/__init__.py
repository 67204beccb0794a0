"""Shared helpers: logging, timing, line handling, input validation."""
