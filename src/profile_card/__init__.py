"""Render GitHub profile statistics as compact SVG cards."""

__version__ = "0.1.0"
