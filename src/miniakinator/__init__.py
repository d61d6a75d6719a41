"""Mini-Akinator word guessing game."""

__version__ = "0.1.0"
