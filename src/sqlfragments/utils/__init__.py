"""Utility functions and helpers for sqlfragments."""

from sqlfragments.utils.decorators import traced

__all__ = [
    "traced",
]
