"""Embed message formatters for modmail-style Discord bots."""

__version__ = "1.0.0"
