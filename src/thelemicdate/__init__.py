"""Thelemic calendar date from a Gregorian date, a place, and the Sun and Moon."""

__version__ = "0.2.0"
