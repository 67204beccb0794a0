"""Plain-text rendering of comparison results."""
