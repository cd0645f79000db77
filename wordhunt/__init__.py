"""Terminal word games: classic word search, hidden-word guessing and a levelled word search."""

__version__ = "0.1.0"
__all__ = ["classic", "guessing", "levels"]