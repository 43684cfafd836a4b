"""Render per-company financial metrics as Word tables."""

__version__ = "0.1.0"
