"""Interactive command-line task tracker with JSON persistence."""

__version__ = "0.1.0"
