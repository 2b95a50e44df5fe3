"""Task board TUI with fuzzy task search."""

__version__ = "0.1.0"
