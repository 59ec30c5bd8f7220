"""Checkie: checkers rules core with tiered bot opponents."""

__version__ = "0.1.0"
