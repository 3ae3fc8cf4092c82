"""A falling-block puzzle game: board, pieces, rules and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]