"""Recipebox - ingredient parsing, recipe scaling and shopping-list aggregation."""

__version__ = "0.1.0"
