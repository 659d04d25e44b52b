"""Readers for name lists and plain text."""
