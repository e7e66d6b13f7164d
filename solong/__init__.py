"""Map loading and validation for a collect-and-exit tile puzzle, with text, formatting and line-reading helpers."""

__version__ = "0.1.0"