"""Puzzle solutions for 2024, days 16 to 25, with shared grid, search and input helpers."""

__version__ = "0.1.0"