"""Helpers for lists: slicing, filtering, sorting, statistics, composition, JSON and chaining."""

__version__ = "0.1.0"