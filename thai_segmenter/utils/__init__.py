"""Utility functions."""

from .text import drop_whitespace, is_whitespace_token, sanitize_text

__all__ = [
    "drop_whitespace",
    "is_whitespace_token",
    "sanitize_text",
]
