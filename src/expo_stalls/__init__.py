"""Expo stall directory — catalog, crowd corrections and visitor feedback."""

__version__ = "0.1.0"
