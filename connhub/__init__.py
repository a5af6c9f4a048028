"""Saved database connection profiles."""
