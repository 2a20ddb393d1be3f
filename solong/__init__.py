"""Map loading and validation, XPM images, colours and text helpers for a tile puzzle game."""

__version__ = "0.1.0"