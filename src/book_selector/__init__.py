"""Weighted book club vote and random selection."""
__version__ = "0.1.0"
