"""Compound interest projections, inverse solves and doubling-time estimates."""

__version__ = "0.1.0"
