"""Data source helpers."""
