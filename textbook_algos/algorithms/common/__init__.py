"""Shared utilities reused by multiple algorithms."""

from .validation import is_finite, is_nan, is_numeric

__all__ = [
    "is_finite",
    "is_nan",
    "is_numeric",
]
