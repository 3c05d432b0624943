"""Astronomy picture gallery: catalog fetch, card rendering and detail modal."""

__version__ = "0.1.0"
